# Cell states stored in the grid buffer.

FLOOR = 0
WALL = 1


# 8-neighbourhood, clockwise from the top.
NEIGHBOURS_8 = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

# Flood-fill order: up, right, down, left.
NEIGHBOURS_4 = ((0, -1), (1, 0), (0, 1), (-1, 0))
