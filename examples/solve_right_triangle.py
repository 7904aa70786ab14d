"""Example: build a right triangle from hypotenuse and leg, then edit a side."""

from trisolve import Triangle


def main() -> None:
    triangle = Triangle.from_hl(10, 6, "ABC")
    print("Right angle at B:", round(triangle.angle("B"), 6))
    for side in ("a", "b", "c"):
        print(f"{side} = {triangle.side_length(side):.6f}")

    triangle.set_side_length({"AB": 5})
    print("After AB=5:")
    for name, (x, y) in triangle.coords.items():
        print(f"{name}: ({x:.6f}, {y:.6f})")


if __name__ == "__main__":
    main()
