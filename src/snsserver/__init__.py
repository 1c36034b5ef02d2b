"""SNS server post, tag and like subsystem."""
