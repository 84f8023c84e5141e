"""Basic rgbapixel usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from rgbapixel import PixelU8, PixelU16, pixel_class


def demonstrate_pixels() -> None:
    # Alpha defaults to the channel maximum.
    accent = PixelU8.new(9, 234, 5)
    print("RGBA tuple:", accent.get_tuple())
    print("Hex:", accent.to_hex())

    # Setters return the pixel, so they chain.
    accent.set_r(200).set_alpha(128)
    print("After setters:", accent.get_vector())

    deep = PixelU16.default()
    print("16-bit default as array:", deep.get_slice())


def demonstrate_iteration() -> None:
    px = PixelU8.new_rgba(1, 2, 3, 4)
    for name, value in zip("rgba", px):
        print(f"{name} = {value}")


def demonstrate_generic() -> None:
    # Pick the pixel class from a numpy dtype.
    cls = pixel_class(np.uint32)
    px = cls.new(1, 2, 3)
    print(f"{cls.__name__} alpha:", px.a)


if __name__ == "__main__":
    demonstrate_pixels()
    demonstrate_iteration()
    demonstrate_generic()
