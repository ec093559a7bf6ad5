"""Runtime configuration for the assistant Lambdas."""
