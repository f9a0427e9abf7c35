import os, argparse
import matplotlib.pyplot as plt
import imageio

from touring import PointSet, TourBuilder, MODES


def render_frame(builder, coords, title, frame_path):
    xs, ys = builder.get_polyline()
    cx = [c[0] for c in coords]
    cy = [c[1] for c in coords]

    plt.figure(figsize=(5, 5))
    plt.plot(cx, cy, "o", color="lightgray")
    plt.plot(xs, ys, "o-")
    plt.title(title)
    plt.axis("equal")
    plt.tight_layout()
    plt.savefig(frame_path, dpi=120, bbox_inches="tight")
    plt.close()
    return frame_path


def visualize(inst, mode, outdir, step=1):
    """Insert the instance's points one by one and save a GIF of the growing tour."""
    os.makedirs(outdir, exist_ok=True)
    builder = TourBuilder()
    coords = inst.coords
    frames = []
    for k, c in enumerate(coords):
        builder.add_point(c, mode=mode)
        if k % step != 0 and k != len(coords) - 1:
            continue
        L = builder.get_total_length()
        title = f"{mode} insertion\npoints={k+1}  length={L:.2f}"
        frame_path = os.path.join(outdir, f"{mode}_frame_{k:03d}.png")
        frames.append(render_frame(builder, coords, title, frame_path))

    gif_path = os.path.join(outdir, f"{mode}_construction.gif")
    with imageio.get_writer(gif_path, mode="I", duration=0.4) as writer:
        for fp in frames:
            writer.append_data(imageio.v2.imread(fp))

    print("Saved:", gif_path)
    return gif_path

def main():
    p = argparse.ArgumentParser()
    p.add_argument("--mode", choices=list(MODES), default="cheapest")
    p.add_argument("--n", type=int, default=30, help="number of points")
    p.add_argument("--square", type=float, default=100.0)
    p.add_argument("--seed", type=int, default=321)
    p.add_argument("--outdir", default="viz")
    p.add_argument("--step", type=int, default=1, help="frame every k insertions")
    args = p.parse_args()

    inst = PointSet.random_euclidean(n=args.n, seed=args.seed, square_size=args.square, name=f"viz{args.n}")
    visualize(inst, args.mode, args.outdir, step=args.step)

if __name__ == "__main__":
    main()
