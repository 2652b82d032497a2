"""Bootstrap procedure and the pure logic behind each step."""
