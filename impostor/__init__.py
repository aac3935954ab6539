"""
El Impostor: a pass-the-device social deduction party game.
"""
