import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--level",
        action="store",
        default="full",
        choices=["quick", "full"],
        help="Set the testing level: 'quick' or 'full'.",
    )


# These parameter names match up with the parameter names for
# test functions detected by pytest, and we test such functions with
# all values in the below sets. For example, a function with the
# parameter name my_team_is_yellow will be tested once with False and
# once with True.
parameter_values = {
    ("my_team_is_yellow",): {
        "quick": [True],
        "full": [False, True],
    },
}


def pytest_generate_tests(metafunc):
    for param_set, cases in parameter_values.items():
        for param in param_set:
            if param in metafunc.fixturenames:
                metafunc.parametrize(param, cases[metafunc.config.getoption("level")])
