"""
AVL Tree Demo -- Insertion traces, rotation cases, height growth, and deletion
rebalancing.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import io
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from avl_tree import AVLTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

WORKLOAD_SIZES = [2 ** k for k in range(1, 15)]

ROTATION_CASES = {
    "Left-Left (single right rotation)": [30, 20, 10],
    "Right-Right (single left rotation)": [10, 20, 30],
    "Left-Right (double rotation)": [30, 10, 20],
    "Right-Left (double rotation)": [10, 30, 20],
}


def build(values):
    tree = AVLTree()
    for v in values:
        tree.add(v)
    return tree


def pre_order_line(tree):
    """Capture ``print_pre_order`` output as a string."""
    out = io.StringIO()
    tree.print_pre_order(out)
    return out.getvalue().rstrip()


def _layout(tree):
    """Place each node at (in-order index, -depth)."""
    positions = {}
    edges = []

    def walk(node, depth, counter):
        if node is None:
            return
        walk(node.left, depth + 1, counter)
        positions[id(node)] = (counter[0], -depth, node.value, node.height)
        counter[0] += 1
        walk(node.right, depth + 1, counter)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((id(node), id(child)))

    walk(tree._root, 0, [0])
    return positions, edges


def draw_tree(ax, tree, title, highlight=()):
    positions, edges = _layout(tree)
    for parent, child in edges:
        x0, y0 = positions[parent][:2]
        x1, y1 = positions[child][:2]
        ax.plot([x0, x1], [y0, y1], color=COLORS["dark"], linewidth=1.2, zorder=1)
    for x, y, value, height in positions.values():
        color = COLORS["red"] if value in highlight else COLORS["blue"]
        ax.scatter([x], [y], s=700, color=color, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white",
                fontsize=10, fontweight="bold", zorder=3)
        ax.text(x, y - 0.32, f"h={height}", ha="center", va="top", fontsize=7, color="gray")
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.set_xlim(-1, max(len(positions), 1))
    ax.set_ylim(-(tree.height() + 1) - 0.2, 0.6)
    ax.axis("off")


# ---------------------------------------------------------------------------
# Example 1: Insertion Traces
# ---------------------------------------------------------------------------
def example_1_insertion_traces():
    """Print pre-order after every insertion for two classic sequences."""
    print("=" * 60)
    print("Example 1: Insertion Traces")
    print("=" * 60)

    sequences = {
        "balanced order": [5, 3, 8, 1, 4, 7, 9],
        "ascending order": [1, 2, 3, 4, 5, 6, 7],
    }

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    for ax, (label, values) in zip(axes, sequences.items()):
        print(f"\n  Inserting in {label}: {values}")
        tree = AVLTree()
        for v in values:
            tree.add(v)
            print(f"    add({v}) -> pre-order: {pre_order_line(tree):<16} height={tree.height()}")
        draw_tree(ax, tree, f"{label}: {values}\nheight={tree.height()}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_insertion_traces.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_insertion_traces.png")


# ---------------------------------------------------------------------------
# Example 2: Rotation Cases
# ---------------------------------------------------------------------------
def example_2_rotation_cases():
    """Show the four imbalance shapes and the tree each one settles into."""
    print("\n" + "=" * 60)
    print("Example 2: Rotation Cases")
    print("=" * 60)

    fig, axes = plt.subplots(1, len(ROTATION_CASES), figsize=(16, 4))
    for ax, (label, values) in zip(axes, ROTATION_CASES.items()):
        tree = build(values)
        print(f"  {label:<36} insert {values} -> {pre_order_line(tree)}")
        draw_tree(ax, tree, f"{label}\ninsert {values}", highlight=(values[-1],))

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_rotation_cases.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_rotation_cases.png")


# ---------------------------------------------------------------------------
# Example 3: Height Growth
# ---------------------------------------------------------------------------
def example_3_height_growth():
    """Compare tree height against the perfect-tree floor and the AVL ceiling."""
    print("\n" + "=" * 60)
    print("Example 3: Height Growth")
    print("=" * 60)

    sizes = np.array(WORKLOAD_SIZES)
    sorted_heights = []
    random_heights = []
    for n in sizes:
        sorted_heights.append(build(range(n)).height())
        random_heights.append(build(np.random.permutation(n).tolist()).height())

    floor = np.ceil(np.log2(sizes + 1)) - 1
    ceiling = 1.44 * np.log2(sizes + 2) - 1

    print(f"\n  {'n':>8} {'sorted':>8} {'random':>8} {'floor':>8} {'AVL bound':>10}")
    print(f"  {'-' * 46}")
    for n, hs, hr, lo, hi in zip(sizes, sorted_heights, random_heights, floor, ceiling):
        print(f"  {n:>8} {hs:>8} {hr:>8} {int(lo):>8} {hi:>10.2f}")

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(sizes, sorted_heights, "o-", color=COLORS["blue"], linewidth=2, label="sorted inserts")
    ax.plot(sizes, random_heights, "s-", color=COLORS["orange"], linewidth=2, label="random inserts")
    ax.plot(sizes, floor, "--", color=COLORS["green"], label=r"$\lceil\log_2(n+1)\rceil - 1$")
    ax.plot(sizes, ceiling, "--", color=COLORS["red"], label=r"$1.44\,\log_2(n+2) - 1$")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("Number of values n")
    ax.set_ylabel("Tree height")
    ax.set_title("AVL Height Stays Logarithmic\nSorted input never degrades into a chain",
                 fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_height_growth.png")


# ---------------------------------------------------------------------------
# Example 4: Deletion Rebalancing
# ---------------------------------------------------------------------------
def example_4_deletion():
    """Remove a two-child node and let the successor take its place."""
    print("\n" + "=" * 60)
    print("Example 4: Deletion Rebalancing")
    print("=" * 60)

    values = [10, 20, 30, 40, 50, 25]
    tree = build(values)
    before = tree.copy()
    print(f"\n  Built from {values}: {pre_order_line(tree)}")

    tree.remove(20)
    print(f"  remove(20) -> {pre_order_line(tree)}")
    print(f"  contains(20)={tree.contains(20)} contains(25)={tree.contains(25)} "
          f"balanced={tree.is_balanced()}")

    tie = build([2, 1, 4, 3, 5])
    print(f"\n  Tie case {tie.pre_order()} remove(1) -> ", end="")
    tie.remove(1)
    print(pre_order_line(tie))

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
    draw_tree(axes[0], before, f"Before: insert {values}", highlight=(20,))
    draw_tree(axes[1], tree, "After remove(20): successor 25 moves up", highlight=(25,))
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_deletion.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_deletion.png")


def generate_pdf_report():
    """Collect every visualization into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "AVL Tree", fontsize=24, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Height-balanced ordered storage through rotations",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "Every node keeps |h(left) - h(right)| <= 1. After each insertion or\n"
            "deletion the path back to the root is rebalanced with single or\n"
            "double rotations, so height stays within 1.44 log2(n+2).\n\n"
            "This demo covers:\n"
            "  1. Insertion traces printed in pre-order\n"
            "  2. The four rotation cases\n"
            "  3. Height growth for sorted and random workloads\n"
            "  4. Deletion of a node with two children\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            fig.suptitle(viz_file.stem.replace("_", " ").title(), fontsize=14,
                         fontweight="bold", y=0.98)
            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("AVL Tree Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_insertion_traces()
    example_2_rotation_cases()
    example_3_height_growth()
    example_4_deletion()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
