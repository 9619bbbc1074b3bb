def test_public_imports() -> None:
    # A lightweight contract test: keep the most common imports stable.
    import ylmpy

    assert hasattr(ylmpy, "__version__")

    from ylmpy import (  # noqa: F401
        InvalidArgumentError,
        binomial,
        deriv1_plmcos_dtheta,
        deriv2_plmcos_dtheta,
        dlkm,
        lnfac,
        plmcos,
        ylmnorm,
    )

    assert issubclass(InvalidArgumentError, ValueError)
