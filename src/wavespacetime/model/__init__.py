"""
The MODEL layer contains the data structures and the numerics of the diagram.
`wave` and `projection` are pure Python/NumPy with no knowledge of Qt.
`state` holds the session store and only uses Qt for its signals.
"""
