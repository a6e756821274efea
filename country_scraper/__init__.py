"""Single-run country list scraper: page -> CSV -> S3, SNS alert on failure."""
