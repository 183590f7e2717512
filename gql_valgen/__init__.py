"""Generate yup, zod and myzod validation schemas from GraphQL schemas."""

__version__ = "0.3.0"
