"""Status lines, rust-project.json generation and worked solutions for Rust exercises."""

__version__ = "0.1.0"