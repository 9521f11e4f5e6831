"""Assemble JBoss Modules repository archives from build artifacts."""
