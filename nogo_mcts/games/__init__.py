from .nogo import NoGoState, NoGoMove, NoGoPlayer, Stone, Legality

__all__ = [
    'NoGoState',
    'NoGoMove',
    'NoGoPlayer',
    'Stone',
    'Legality'
]
