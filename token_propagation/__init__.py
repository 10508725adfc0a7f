"""Design token propagation analysis for CSS codebases."""
