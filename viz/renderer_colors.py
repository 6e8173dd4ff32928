# viz/renderer_colors.py
BG = (0, 0, 0)
BODY = (0, 121, 241)
HEAD = (102, 191, 255)
FRUIT = (230, 41, 55)
TEXT = (255, 255, 255)
HIGHLIGHT = (255, 255, 255)
