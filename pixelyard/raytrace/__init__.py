"""A small path tracer rendering spheres to 24-bit BMP images."""