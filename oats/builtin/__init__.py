from oats.builtin.registry import PrimitiveRegistry, default_registry

__all__ = ["PrimitiveRegistry", "default_registry"]
