# Note store services
