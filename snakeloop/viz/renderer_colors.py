# snakeloop/viz/renderer_colors.py
BG = (173, 216, 230)      # light blue, as the original play field
FOOD = (200, 70, 70)
HEAD = (30, 120, 50)
BODY = (60, 170, 80)
TEXT = (20, 20, 30)
SHADE = (0, 0, 0, 120)
