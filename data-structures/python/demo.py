"""
Binary Search Tree Demo — Worked examples, height analysis, and visualizations.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
TREE_SIZES = [10, 25, 50, 100, 200, 400, 800]
TRIALS = 20

VIZ_DIR = Path(__file__).parent / "viz"

logger = logging.getLogger(__name__)


def build_tree(values) -> BinarySearchTree:
    tree: BinarySearchTree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def measure_heights(sizes: List[int], trials: int, rng: np.random.Generator) -> Dict[str, np.ndarray]:
    """
    Measure tree height under sorted and shuffled insertion orders.

    Args:
        sizes: Number of distinct values inserted per tree
        trials: Shuffled trees built per size
        rng: Random generator used for the shuffles

    Returns:
        Dict with "sorted" heights, shape (len(sizes),), and "shuffled"
        heights, shape (len(sizes), trials)
    """
    sorted_heights = np.zeros(len(sizes), dtype=int)
    shuffled_heights = np.zeros((len(sizes), trials), dtype=int)

    for i, n in enumerate(sizes):
        sorted_heights[i] = build_tree(range(n)).height()
        for t in range(trials):
            shuffled_heights[i, t] = build_tree(rng.permutation(n).tolist()).height()
        logger.info("n=%d sorted=%d shuffled_mean=%.2f", n, sorted_heights[i], shuffled_heights[i].mean())

    return {"sorted": sorted_heights, "shuffled": shuffled_heights}


def example_1_basic_operations():
    """Membership on a three-node tree."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    tree = build_tree(["C", "B", "D"])
    print(tree.dump())
    for probe in "ABCDE":
        print(f"contains({probe!r}) = {tree.contains(probe)}")
    print(f"size() = {tree.size()}")

    return tree


def example_2_delete_cases():
    """Walk through each structural delete case."""
    print("\n" + "=" * 60)
    print("Example 2: Delete Cases")
    print("=" * 60)

    tree = build_tree([50, 30, 70, 20, 60, 80, 65, 10, 75])
    print("Initial tree:")
    print(tree.dump())

    # left child only, leaf, right child only, two children twice, then a miss
    for value in [20, 10, 60, 70, 50, 99]:
        removed = tree.delete(value)
        print(f"\ndelete({value}) -> {removed}")
        print(tree.dump())

    print(f"\nIn-order after deletes: {tree.in_order()}")
    return tree


def example_3_lazy_iteration():
    """Consume the in-order iterator one step at a time."""
    print("\n" + "=" * 60)
    print("Example 3: Lazy In-Order Iteration")
    print("=" * 60)

    tree = build_tree("DABCFEG")
    it = tree.iter()
    step = 0
    for value in it:
        step += 1
        pending = [node.value for node in it._unvisited]
        print(f"step {step}: yielded {value!r}, stack = {pending}")

    print(f"Concatenated: {''.join(tree)}")
    return tree


def example_4_height_vs_insertion_order():
    """Height growth for sorted versus shuffled insertion."""
    print("\n" + "=" * 60)
    print("Example 4: Height vs Insertion Order")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    heights = measure_heights(TREE_SIZES, TRIALS, rng)
    sizes = np.array(TREE_SIZES)
    shuffled_mean = heights["shuffled"].mean(axis=1)
    shuffled_std = heights["shuffled"].std(axis=1)

    print(f"{'n':<8} {'sorted':<10} {'shuffled (mean)':<18} {'log2(n)':<10}")
    print("-" * 46)
    for n, h_sorted, h_mean in zip(sizes, heights["sorted"], shuffled_mean):
        print(f"{n:<8} {h_sorted:<10} {h_mean:<18.2f} {np.log2(n):<10.2f}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    axes[0].plot(sizes, heights["sorted"], "o-", color="#e74c3c", linewidth=2, label="Sorted insertion")
    axes[0].errorbar(sizes, shuffled_mean, yerr=shuffled_std, fmt="s-", color="steelblue",
                     linewidth=2, capsize=3, label="Shuffled insertion")
    axes[0].set_xlabel("Number of values")
    axes[0].set_ylabel("Tree height")
    axes[0].set_title("Height Growth")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(sizes, shuffled_mean, "s-", color="steelblue", linewidth=2, label="Shuffled (mean)")
    axes[1].plot(sizes, np.log2(sizes), "g--", linewidth=2, label="log2(n)")
    axes[1].plot(sizes, 2.99 * np.log(sizes), "k:", linewidth=2, label="2.99 ln(n)")
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Number of values (log scale)")
    axes[1].set_ylabel("Tree height")
    axes[1].set_title("Shuffled Insertion vs Logarithmic Bounds")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_height_vs_order.png", dpi=150)
    plt.close(fig)

    return fig, heights


def generate_pdf_report(figures):
    """Bundle the title page and all example figures into report.pdf."""
    pdf_path = Path(__file__).parent / "report.pdf"
    print(f"\nGenerating PDF report: {pdf_path}")

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Search Tree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced Ordered Set", fontsize=24, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, fig in figures:
            fig.suptitle(title, fontsize=14, fontweight="bold", y=1.02)
            pdf.savefig(fig, bbox_inches="tight")

    print(f"Report saved to {pdf_path}")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    VIZ_DIR.mkdir(exist_ok=True)

    print("\n" + "#" * 60)
    print("#" + " " * 18 + "BINARY SEARCH TREE DEMO" + " " * 17 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_operations()
    example_2_delete_cases()
    example_3_lazy_iteration()

    figures = []
    fig4, _ = example_4_height_vs_insertion_order()
    figures.append(("Example 4: Height vs Insertion Order", fig4))

    generate_pdf_report(figures)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
