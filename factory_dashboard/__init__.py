"""Factory Dashboard API: manufacturing operations dashboard backend."""
