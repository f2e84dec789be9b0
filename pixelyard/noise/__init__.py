"""Colour gradients on 32-bit RGBA images and BMP output."""