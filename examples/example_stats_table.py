"""
Example: Reporting a solver run with nlpstats

A fixed-step gradient descent on a convex quadratic records its
evaluations on a Model, prints one table row per iteration and a full
report at the end.

Problem:
    minimize    (x1 - 1)^2 + 10*(x2 + 2)^2
"""

import time

import numpy as np
import nlpstats


FIELDS = ['iter', 'objective', 'dual_feas', 'neval_obj', 'neval_grad']


def main():
    print()
    print("=" * 70)
    print("nlpstats Example: Gradient descent report")
    print("=" * 70)
    print()

    model = nlpstats.Model(np.array([0.0, 0.0]), name="quadratic")
    weights = np.array([1.0, 10.0])
    center = np.array([1.0, -2.0])

    def obj(x):
        model.counters.increment('neval_obj')
        return float(weights @ (x - center) ** 2)

    def grad(x):
        model.counters.increment('neval_grad')
        return 2 * weights * (x - center)

    x = model.x0
    step = 0.05
    start = time.perf_counter()
    print(nlpstats.statshead(FIELDS))
    status = 'max_iter'
    for k in range(200):
        f, g = obj(x), grad(x)
        gnorm = float(np.linalg.norm(g))
        row = nlpstats.ExecutionStats('unknown', model, objective=f, dual_feas=gnorm, iter=k)
        if k % 10 == 0:
            print(nlpstats.statsline(row, FIELDS))
        if gnorm < 1e-8:
            status = 'first_order'
            break
        x = x - step * g

    stats = nlpstats.ExecutionStats(
        status, model,
        solution=x,
        objective=f,
        dual_feas=gnorm,
        iter=k,
        elapsed_time=time.perf_counter() - start,
        solver_specific={'step': step},
    )

    print()
    print(stats)
    print()
    print("=" * 70)
    print()


if __name__ == "__main__":
    main()
