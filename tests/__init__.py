"""Test package for the Stroop trainer.

Core suites drive the game engine with a hand-advanced clock; headless
simulation suites play complete sessions; the smoke suites run the pygame UI
with SDL's dummy video driver so no real window opens. Run ``pytest`` from the
project root.
"""
