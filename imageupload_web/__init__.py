"""Front-end proxy services for the customer image upload API."""
