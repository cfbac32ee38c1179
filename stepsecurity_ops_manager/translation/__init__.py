"""Translation between user-facing policies and their stored API representation."""
