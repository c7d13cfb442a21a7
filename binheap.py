import os
import csv
import sys
import time
from typing import List

import numpy as np
import pandas as pd

from heap_ import BinaryHeap
from logger import print_, set_verbose
from utils import max_order, min_order, opposite

INPUT_FILENAME = "heap_input.txt"
GENERATED_VALUES_FILENAME = "values.csv"
OUTPUT_FILENAME = "sorted_output.csv"

ORDERS = {
    "max": max_order,
    "min": min_order,
}


class HeapParams:
    def __init__(self):
        self.order = "max"
        self.values_from_file = 0
        self.values_filename = ""
        self.n_values = 0
        self.average_value = 0.0
        self.top_k = 0
        self.seed = None
        self.verbose = 0


def read_input(params, input_filename=INPUT_FILENAME):
    try:
        with open(input_filename, "r") as input_file:
            for line in input_file:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    raise ValueError(f"Malformed line in {input_filename}: {line}")
                parameter, value = line.split("=", 1)
                parameter = parameter.strip()
                value = value.strip()

                if parameter == "order":
                    if value not in ORDERS:
                        raise ValueError(f"Unknown order {value}, expected one of {', '.join(ORDERS)}")
                    params.order = value
                elif parameter == "generate_values_from_file":
                    params.values_from_file = 1 if value == "true" else 0
                elif parameter == "values_filename":
                    params.values_filename = value
                elif parameter == "n_values":
                    params.n_values = int(value)
                elif parameter == "average_value":
                    params.average_value = float(value)
                elif parameter == "top_k":
                    params.top_k = int(value)
                    if params.top_k < 0:
                        raise ValueError("top_k must not be negative")
                elif parameter == "seed":
                    params.seed = int(value)
                elif parameter == "verbose":
                    params.verbose = 1 if value == "true" else 0
                else:
                    raise ValueError(f"Unknown parameter {parameter}")
    except FileNotFoundError:
        print(f"ERROR: cannot open file <{input_filename}> in current directory.", file=sys.stderr)
        sys.exit(-1)
    return params


def initialize_random_generator(seed=None):
    return np.random.default_rng(seed)


def generate_random_values(params, random_generator: np.random.Generator, values_filename=GENERATED_VALUES_FILENAME) -> None:
    try:
        with open(values_filename, "w", newline='') as values_file:
            writer = csv.writer(values_file)
            writer.writerow(["id", "value"])
            for i in range(params.n_values):
                value = int((params.average_value + random_generator.normal(0, 1)) * 1000)
                writer.writerow([i, value])
    except OSError as e:
        raise RuntimeError(f"Error generating random values: {e}")


def read_values(values_filename: str) -> List[int]:
    """Reads the value column of a CSV file."""
    try:
        values_df = pd.read_csv(values_filename)
    except FileNotFoundError:
        raise RuntimeError(f"File '{values_filename}' not found. Please ensure it exists or generate values first.")
    except pd.errors.EmptyDataError:
        return []
    except ValueError as ve:
        raise RuntimeError(f"Error parsing values file '{values_filename}': {ve}")

    if "value" not in values_df.columns:
        raise RuntimeError(f"Values file '{values_filename}' has no 'value' column")
    return values_df["value"].dropna().tolist()


def initialize_values(params, random_generator: np.random.Generator, values_filename=GENERATED_VALUES_FILENAME) -> List[int]:
    if not params.values_from_file:
        generate_random_values(params, random_generator, values_filename)
        return read_values(values_filename)
    return read_values(params.values_filename)


def heap_sort(values, comparator) -> list:
    heap = BinaryHeap(comparator, size=max(len(values), 1))
    for value in values:
        heap.push(value)
    print_(f"loaded {heap.size()} values, root {heap.peek()}")

    result = []
    while not heap.is_empty():
        result.append(heap.poll())
    return result


def top_k(values, comparator, k: int) -> list:
    """Best k values in comparator order, kept in a heap whose root is the worst one kept."""
    if k <= 0:
        return []
    heap = BinaryHeap(opposite(comparator), size=k)
    for value in values:
        if heap.size() < k:
            heap.push(value)
        elif comparator(value, heap.peek()):
            print_(f"replacing {heap.peek()} with {value}")
            heap.replace(value)

    kept = []
    while not heap.is_empty():
        kept.append(heap.poll())
    kept.reverse()
    return kept


def run_heap(values, params) -> list:
    comparator = ORDERS[params.order]
    if params.top_k:
        return top_k(values, comparator, params.top_k)
    return heap_sort(values, comparator)


def write_output(result, output_dir_name):
    if not os.path.exists(output_dir_name):
        print("binheap.py: Cannot find the output directory. The output will be stored in the current directory.")
        output_dir_name = "./"

    with open(os.path.join(output_dir_name, OUTPUT_FILENAME), "w", newline='') as csv_output:
        writer = csv.writer(csv_output)
        writer.writerow(["rank", "value"])
        for rank, value in enumerate(result):
            writer.writerow([rank, value])


def main(argv):
    if len(argv) != 2:
        print("ERROR binheap.py: please specify the output directory", file=sys.stderr)
        return -1

    output_dir_name = argv[1]
    params = HeapParams()
    read_input(params)
    set_verbose(params.verbose)

    random_generator = initialize_random_generator(params.seed)
    print("VALUES INITIALIZATION")
    values = initialize_values(params, random_generator)
    print(f"{len(values)} values loaded")

    print("HEAP EXECUTION")
    begin = time.time()
    result = run_heap(values, params)
    time_spent = time.time() - begin
    print(f"Time consumed by heap operations: {time_spent:.2f} s")

    write_output(result, output_dir_name)
    return 0


def _cli():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    _cli()
