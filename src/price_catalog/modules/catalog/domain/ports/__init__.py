from .clock import Clock
from .id_generator import IdGenerator
from .repository import ItemRepository

__all__ = ["Clock", "IdGenerator", "ItemRepository"]
