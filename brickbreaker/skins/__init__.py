"""BrickBreaker skins for rendering."""

from .base import BrickBreakerSkin
from .geometric import GeometricSkin

SKINS = {
    GeometricSkin.NAME: GeometricSkin,
}

__all__ = [
    'BrickBreakerSkin',
    'GeometricSkin',
    'SKINS',
]
