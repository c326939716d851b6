import sys

from .gradient import render_gradient


def main() -> int:
    ppm = render_gradient()
    print(ppm.output())
    return 0


if __name__ == "__main__":
    sys.exit(main())
