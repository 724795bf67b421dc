"""
Priority Queue Demo -- Extraction order, construction cost, per-operation cost,
and heap layout visualization.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import operator
import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from dynamic_array import DynamicArray
from priority_queue import PriorityQueue

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}


class CountingCompare:
    """Ordering predicate that counts how many times it is called."""

    def __init__(self, compare=operator.lt):
        self.compare = compare
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return self.compare(a, b)


def drain(pq):
    result = []
    while not pq.empty():
        result.append(pq.top())
        pq.pop()
    return result


# ---------------------------------------------------------------------------
# Example 1: Extraction Order
# ---------------------------------------------------------------------------
def example_1_extraction_order():
    """Drain a max-heap and a min-heap built from the same sample."""
    print("=" * 60)
    print("Example 1: Extraction Order")
    print("=" * 60)

    values = np.random.randint(0, 100, size=20).tolist()
    max_order = drain(PriorityQueue.from_iterable(values))
    min_order = drain(PriorityQueue.from_iterable(values, operator.gt))

    print(f"  Input:          {values}")
    print(f"  Max-heap order: {max_order}")
    print(f"  Min-heap order: {min_order}")
    print(f"  Matches sorted: {max_order == sorted(values, reverse=True) and min_order == sorted(values)}")

    fig, axes = plt.subplots(1, 3, figsize=(15, 4.5))
    steps = np.arange(len(values))
    axes[0].bar(steps, values, color=COLORS["dark"])
    axes[0].set_title("Input order")
    axes[1].bar(steps, max_order, color=COLORS["red"])
    axes[1].set_title("Popped from max-heap (operator.lt)")
    axes[2].bar(steps, min_order, color=COLORS["blue"])
    axes[2].set_title("Popped from min-heap (operator.gt)")
    for ax in axes:
        ax.set_xlabel("Position")
        ax.set_ylabel("Value")
        ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_extraction_order.png", dpi=150)
    plt.close(fig)

    return fig, max_order


# ---------------------------------------------------------------------------
# Example 2: Construction Cost
# ---------------------------------------------------------------------------
def example_2_construction_cost():
    """Compare comparator calls of n pushes against one bulk heapify."""
    print("\n" + "=" * 60)
    print("Example 2: Construction Cost (push-by-push vs. bulk heapify)")
    print("=" * 60)

    sizes = np.array([2 ** k for k in range(4, 15)])
    push_calls = []
    heapify_calls = []

    for n in sizes:
        values = np.random.rand(n).tolist()

        counter = CountingCompare()
        PriorityQueue.from_iterable(values, counter)
        push_calls.append(counter.calls)

        counter = CountingCompare()
        PriorityQueue.from_container(counter, DynamicArray.from_iterable(values))
        heapify_calls.append(counter.calls)

        print(f"  n = {n:6d}   from_iterable: {push_calls[-1]:8d}   from_container: {heapify_calls[-1]:8d}")

    push_calls = np.array(push_calls)
    heapify_calls = np.array(heapify_calls)
    print(f"\n  heapify calls / n at largest size: {heapify_calls[-1] / sizes[-1]:.3f}")

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    ax = axes[0]
    ax.loglog(sizes, push_calls, "o-", color=COLORS["red"], label="from_iterable (n pushes)")
    ax.loglog(sizes, heapify_calls, "s-", color=COLORS["green"], label="from_container (heapify)")
    ax.loglog(sizes, sizes * np.log2(sizes), "--", color="gray", alpha=0.7, label="n log2 n")
    ax.loglog(sizes, 2 * sizes, ":", color="gray", alpha=0.7, label="2n")
    ax.set_xlabel("n")
    ax.set_ylabel("Comparator calls")
    ax.set_title("Construction cost")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")

    ax = axes[1]
    ax.semilogx(sizes, push_calls / sizes, "o-", color=COLORS["red"], label="from_iterable")
    ax.semilogx(sizes, heapify_calls / sizes, "s-", color=COLORS["green"], label="from_container")
    ax.set_xlabel("n")
    ax.set_ylabel("Comparator calls per element")
    ax.set_title("Per-element construction cost")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_construction_cost.png", dpi=150)
    plt.close(fig)

    return fig, (sizes, push_calls, heapify_calls)


# ---------------------------------------------------------------------------
# Example 3: Push / Pop Cost
# ---------------------------------------------------------------------------
def example_3_operation_cost():
    """Average comparator calls for a single push and pop at a given size."""
    print("\n" + "=" * 60)
    print("Example 3: Per-operation Cost")
    print("=" * 60)

    sizes = np.array([2 ** k for k in range(3, 15)])
    trials = 200
    push_avg = []
    pop_avg = []

    for n in sizes:
        counter = CountingCompare()
        pq = PriorityQueue.from_container(counter, DynamicArray.from_iterable(np.random.rand(n).tolist()))

        counter.calls = 0
        for v in np.random.rand(trials):
            pq.push(float(v))
            pq.pop()
        mixed = counter.calls / trials

        pops = min(trials, n // 2)
        counter.calls = 0
        for _ in range(pops):
            pq.pop()
        pop_avg.append(counter.calls / pops)
        push_avg.append(mixed - pop_avg[-1])

        print(f"  n = {n:6d}   push: {push_avg[-1]:6.2f}   pop: {pop_avg[-1]:6.2f}   log2 n: {np.log2(n):5.2f}")

    push_avg = np.array(push_avg)
    pop_avg = np.array(pop_avg)

    fig, ax = plt.subplots(figsize=(9, 5.5))
    ax.semilogx(sizes, pop_avg, "o-", color=COLORS["purple"], label="pop")
    ax.semilogx(sizes, push_avg, "s-", color=COLORS["orange"], label="push (estimated)")
    ax.semilogx(sizes, 2 * np.log2(sizes), "--", color="gray", alpha=0.7, label="2 log2 n")
    ax.set_xlabel("Heap size n")
    ax.set_ylabel("Comparator calls per operation")
    ax.set_title("Push and pop stay logarithmic")
    ax.legend()
    ax.grid(True, alpha=0.3, which="both")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_operation_cost.png", dpi=150)
    plt.close(fig)

    return fig, (sizes, push_avg, pop_avg)


# ---------------------------------------------------------------------------
# Example 4: Heap Layout
# ---------------------------------------------------------------------------
def _draw_tree(ax, values, title, color):
    n = len(values)
    positions = {}
    for i in range(1, n + 1):
        depth = int(np.floor(np.log2(i)))
        slot = i - 2 ** depth
        x = (slot + 0.5) / 2 ** depth
        positions[i] = (x, -depth)

    for i in range(2, n + 1):
        x0, y0 = positions[i // 2]
        x1, y1 = positions[i]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1, zorder=1)
    for i, (x, y) in positions.items():
        ax.scatter(x, y, s=700, color=color, zorder=2)
        ax.text(x, y, str(values[i - 1]), ha="center", va="center", color="white", fontweight="bold")
        ax.text(x, y - 0.32, f"[{i - 1}]", ha="center", va="center", fontsize=7, color="gray")

    ax.set_title(title)
    ax.set_xlim(0, 1)
    ax.axis("off")


def example_4_heap_layout():
    """Show the storage array of a heap as the tree it encodes."""
    print("\n" + "=" * 60)
    print("Example 4: Heap Layout")
    print("=" * 60)

    values = [5, 3, 8, 1, 9, 2, 7, 4, 6, 0]
    raw = DynamicArray.from_iterable(values)
    heap = PriorityQueue.from_container(operator.lt, raw.copy())
    pushed = PriorityQueue.from_iterable(values)

    print(f"  Storage before heapify: {list(raw)}")
    print(f"  After from_container:   {list(heap._container)}")
    print(f"  After n pushes:         {list(pushed._container)}")

    fig, axes = plt.subplots(1, 3, figsize=(16, 5))
    _draw_tree(axes[0], list(raw), "Unordered storage", COLORS["dark"])
    _draw_tree(axes[1], list(heap._container), "from_container (heapify)", COLORS["green"])
    _draw_tree(axes[2], list(pushed._container), "from_iterable (pushes)", COLORS["red"])
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_heap_layout.png", dpi=150)
    plt.close(fig)

    return fig, heap


def generate_pdf_report(figures_data):
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Priority Queue", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Binary Heap over a Pluggable Storage Container", fontsize=22, ha="center")
        fig.text(0.5, 0.35, "Demonstration & Analysis Report", fontsize=18, ha="center", style="italic")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.95, "Summary", fontsize=24, ha="center", fontweight="bold")

        summary_text = """
This report exercises a binary-heap priority queue whose storage and
ordering are both injected.

• Operations:
  - top()  : O(1), raises IndexError when empty
  - push() : O(log n), percolate-down walked up the ancestors
  - pop()  : O(log n), no-op when empty

• Construction paths:
  - from_iterable  : one push per element, O(n log n)
  - from_container : bulk heapify from the last parent, O(n)

• Ordering:
  - operator.lt keeps the maximum on top
  - operator.gt keeps the minimum on top

Key Findings:
  1. Draining reproduces sorted order in both directions
  2. Bulk heapify needs fewer than 2n comparisons
  3. Push and pop comparisons track log2 n
"""
        fig.text(0.1, 0.85, summary_text, fontsize=12, ha="left", va="top",
                 fontfamily="monospace", linespacing=1.5)
        pdf.savefig(fig)
        plt.close(fig)

        for title, image_name in figures_data:
            fig = plt.figure(figsize=(11, 8.5))
            fig.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            img = plt.imread(VIZ_DIR / image_name)
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(img)
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    print("\n" + "#" * 60)
    print("#" + " " * 20 + "PRIORITY QUEUE DEMO" + " " * 19 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_extraction_order()
    example_2_construction_cost()
    example_3_operation_cost()
    example_4_heap_layout()

    figures = [
        ("Example 1: Extraction Order", "01_extraction_order.png"),
        ("Example 2: Construction Cost", "02_construction_cost.png"),
        ("Example 3: Per-operation Cost", "03_operation_cost.png"),
        ("Example 4: Heap Layout", "04_heap_layout.png"),
    ]
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
