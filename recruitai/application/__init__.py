"""Application services coordinating domain logic and infrastructure ports."""
