"""Domain entities and rules, free of HTTP and storage concerns."""
