"""Convert GraphQL introspection results into SDL."""
