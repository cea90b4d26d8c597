#!/usr/bin/env python3
"""
demo.py - walk through every input kind the quantile function accepts

Run from the repository root after `pip install -e .`:
    python examples/demo.py
"""
import numpy as np
import pandas as pd

from weibull_quantile import matrix, quantile


def main():
    # Plain lists
    data = [i / 10 for i in range(10)]
    print(f"Arrays: {quantile(data)}\n")

    # Records, via an accessor
    data = [{"x": v} for v in data]
    print(f"Accessors: {quantile(data, accessor=lambda d: d['x'])}\n")

    # Records, overwritten in place at a nested path
    data = [{"x": [i, d["x"]]} for i, d in enumerate(data)]
    print("Deepset:")
    for d in quantile(data, path="x/1", sep="/"):
        print(f"  {d}")
    print()

    # numpy arrays and pandas Series
    data = np.array([i / 10 for i in range(10)], dtype=np.float32)
    print(f"Typed arrays: {','.join(str(v) for v in quantile(data))}\n")
    print(f"Series:\n{quantile(pd.Series(data, name='p'))}\n")

    # Matrices
    mat = matrix(data, (5, 2), "float32")
    print(f"Matrix: {quantile(mat)}\n")

    # Matrices with a custom output data type
    out = quantile(mat, dtype="uint8")
    print(f"Matrix ({out.dtype}): {out}\n")


if __name__ == "__main__":
    main()
