"""Whitted-style ray tracer with procedural and recursive portal textures.

This package renders scenes of spheres, planes and rectangles lit by
directional lights, with support for:
- Hard shadows and recursive mirror reflection
- Procedural textures (checkerboard, Mandelbrot set, coordinate remapping)
- Portal textures that show the scene through a second camera
- Gaussian-filtered oversampling, traced in parallel
- PPM and PNG output

Subpackages:
    core: Vectors, colors, numerics, the integrator, filtering and rendering
    geometry: Shape primitives and intersection algorithms
    textures: Color functions over surface coordinates
    scene: Scene container, ray-scene queries and preset scenes
    camera: Pinhole camera with ray generation
    preview: Image quantization and export
"""

__version__ = "0.1.0"
