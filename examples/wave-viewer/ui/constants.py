"""Screen layout and timing constants."""
GRID_PX = 528
STATUS_H = 56
SCREEN_W = GRID_PX
SCREEN_H = GRID_PX + STATUS_H
FPS = 60
FAST_FORWARD = 8  # tick speed multiplier while F is held
