"""
The VIEW layer: QPainter scene rendering, the canvas widget, transport
controls, companion plots and the main window.
"""
