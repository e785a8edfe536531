"""Core build steps (version, manifest, header, compiler, config)."""
