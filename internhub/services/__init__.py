"""Business rules sitting between the routes and the repository."""
