# FILE: constants.py

ROW_COUNT = 7
COLUMN_COUNT = 8
WINDOW_LENGTH = 4

EMPTY = 0
RED_TEAM = 1  # human, minimizing
YEL_TEAM = 2  # AI, maximizing

# (row step, column step): vertical, horizontal, down-right, down-left
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))

# Points for a window holding 0..4 of the same team's pieces
WINDOW_SCORES = (0, 0, 10, 100, 1000)

DRAW_SCORE = 0

TEAM_SYMBOLS = {EMPTY: '.', RED_TEAM: 'R', YEL_TEAM: 'Y'}


def other_team(team):
    return RED_TEAM if team == YEL_TEAM else YEL_TEAM
