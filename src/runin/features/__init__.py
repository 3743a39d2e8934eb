"""Feature packages: target selection and command execution."""
