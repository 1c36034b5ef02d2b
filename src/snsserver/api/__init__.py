"""HTTP API for the SNS server."""
