#!/usr/bin/env python3
"""
Build a small stack of dense layer configurations, print their memory
reports, bind them to one shared parameter buffer, and export the
configurations to JSON.

Useful as a quick sanity check of parameter counts and memory estimates
when changing layer configuration code.
"""

import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/layerconf/...
#   scripts/_export_dense_config_json.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import logging
from pathlib import Path

import numpy as np

from layerconf import DenseLayer, InputType, MemoryUseMode, to_json


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    np.random.seed(0)

    # ----------------------------
    # Configure layers
    # ----------------------------
    confs = [
        DenseLayer.builder().n_out(128).activation("relu").updater("adam").dropout(0.2).name("hidden").build(),
        DenseLayer.builder().n_out(10).activation("softmax").updater("adam").name("output").build(),
    ]

    # ----------------------------
    # Shape inference + memory reports
    # ----------------------------
    input_type = InputType.convolutional_flat(28, 28, 1)
    resolved = []
    for conf in confs:
        conf = conf.with_inferred_n_in(input_type)
        report = conf.memory_report(input_type)
        print(report.format_summary())
        print(
            "  training bytes (minibatch=32, float32): "
            f"{report.total_memory_bytes(32, MemoryUseMode.TRAINING)}"
        )
        resolved.append(conf)
        input_type = report.output_type

    # ----------------------------
    # Bind to one flat buffer
    # ----------------------------
    total = sum(conf.num_params() for conf in resolved)
    buffer = np.zeros(total, dtype=np.float32)
    offset = 0
    for index, conf in enumerate(resolved):
        n = conf.num_params()
        layer = conf.instantiate(buffer[offset : offset + n], layer_index=index)
        print(layer)
        offset += n

    # ----------------------------
    # Save JSON configurations
    # ----------------------------
    out_path = Path("dense_configs.json")
    out_path.write_text("[\n" + ",\n".join(to_json(c) for c in resolved) + "\n]\n")
    print(f"\nSaved JSON configurations to: {out_path.resolve()}")


if __name__ == "__main__":
    main()
