"""Data access layer over the single DynamoDB table."""
