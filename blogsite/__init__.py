"""Personal blog backend and post migration tooling."""
