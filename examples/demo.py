"""Demo script: grow a dodecahedral sphere and render it with matplotlib."""

from pathlib import Path

from goldberg import dodecahedron, generate, iterate, render_mpl

OUTPUT = Path(__file__).resolve().parent / "sphere.pdf"


def main():
    seed = dodecahedron()
    for complexity in range(4):
        shape = iterate(seed, complexity)
        print(
            f"complexity {complexity}: {shape.n_vertices} vertices, "
            f"{shape.n_primary} pentagons, {shape.n_hex} hexagons"
        )

    mesh = generate(seed, 2)
    print(f"Mesh: {mesh.n_vertices} vertices, {mesh.n_triangles} triangles")

    render_mpl(mesh, output=OUTPUT, show=False)
    print(f"Rendered to {OUTPUT}")


if __name__ == "__main__":
    main()
