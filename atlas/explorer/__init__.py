"""Atlas Countries Explorer application: state layer, console view and entry point."""
