"""Exception types raised by the infrastructure layer."""
