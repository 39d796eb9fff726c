"""Common hero sprite definitions shared between the core and its consumers."""
