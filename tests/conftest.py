import numpy as np
import pytest

from nlpstats import ExecutionStats, LeastSquaresModel, Model


@pytest.fixture
def unconstrained_model() -> Model:
    """Two-variable unconstrained model: 3 objective and 2 gradient evaluations."""
    model = Model(np.zeros(2), name="unc")
    model.counters.increment('neval_obj', 3)
    model.counters.increment('neval_grad', 2)
    return model


@pytest.fixture
def constrained_model() -> Model:
    model = Model(np.ones(3), ncon=2, name="con")
    model.counters.increment('neval_cons', 4)
    model.counters.increment('neval_jac')
    return model


@pytest.fixture
def nls_model() -> LeastSquaresModel:
    model = LeastSquaresModel(np.zeros(2), nequ=5, name="nls")
    model.counters.increment('neval_obj', 2)
    model.counters.increment('neval_residual', 7)
    model.counters.increment('neval_jac_residual', 3)
    return model


@pytest.fixture
def first_order_stats(unconstrained_model) -> ExecutionStats:
    return ExecutionStats('first_order', unconstrained_model, objective=1.5, iter=10)
