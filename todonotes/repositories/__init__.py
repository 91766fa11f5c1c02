# Ordered in-memory repositories
