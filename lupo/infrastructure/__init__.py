"""Infrastructure adapters: file decoding, storage, settings and logging."""
