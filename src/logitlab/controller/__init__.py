"""
The CONTROLLER layer turns user intent into state changes.
Optimizer, boundary geometry and the render coordinator are Qt-free;
only the training player touches the Qt event loop.
"""
