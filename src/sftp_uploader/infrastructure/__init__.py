"""Infrastructure layer - adapters for the SFTP ports."""
