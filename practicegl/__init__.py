"""OpenGL building blocks: a free-look camera, vertex packing, shaders, file reading and two demos."""

__version__ = "0.0.0"