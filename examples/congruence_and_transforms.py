"""Example pipeline: construct triangles by each congruence theorem and transform one."""

from trisolve import GeometryError, Line, Triangle


def main() -> None:
    built = {
        "SSS": Triangle.from_sss(7, 10, 5),
        "SAS": Triangle.from_sas(4, 90, 3),
        "ASA": Triangle.from_asa(60, 10, 60),
        "AAS": Triangle.from_aas(90, 30, 10),
        "HL": Triangle.from_hl(13, 5),
    }
    for label, triangle in built.items():
        sides = ", ".join(f"{s}={triangle.side_length(s):.4f}" for s in ("a", "b", "c"))
        print(f"{label}: {sides}")

    triangle = built["ASA"]
    mirror = triangle.copy().reflect(Line(1, 0, -100)).rotate(45).scale(1.5)
    print("Mirrored copy:", mirror)

    try:
        Triangle.from_sss(1, 1, 3)
    except GeometryError as exc:
        print(f"Rejected {exc.kind}: {exc}")


if __name__ == "__main__":
    main()
