"""Infrastructure layer: storage implementations behind core interfaces."""
