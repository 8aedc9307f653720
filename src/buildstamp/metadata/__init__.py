"""Build metadata sources: git checkout facts, YAML files, CLI overrides."""
