"""
pygame presentation layer: reads GameState every frame, feeds it key presses.
"""
