"""Infrastructure: logging and configuration."""
