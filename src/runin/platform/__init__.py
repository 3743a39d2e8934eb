"""Platform adapters: logging, git, child processes."""
