"""
The CONTROLLER layer turns pointer gestures, transport commands and frame
ticks into store mutations. It never draws.
"""
