"""Business profile domain: data types and display formatting."""
