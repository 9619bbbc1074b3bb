import logging
from math import cos, sin

import click

from ylmpy.env import parse_log_level_env
from ylmpy.exceptions import InvalidArgumentError
from ylmpy.legendre import deriv1_plmcos_dtheta, deriv2_plmcos_dtheta, plmcos
from ylmpy.normalization import ylmnorm
from ylmpy.wigner import dlkm

log = logging.getLogger(__name__)

_PLM_DERIVATIVES = {
    0: plmcos,
    1: deriv1_plmcos_dtheta,
    2: deriv2_plmcos_dtheta,
}


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("ylmpy")
    if not logger.handlers:
        formatter = logging.Formatter("%(levelname)s (%(name)s): %(message)s")
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        logger.addHandler(console)
    logger.setLevel(logging.DEBUG if verbose else parse_log_level_env())


def _evaluate(func, *args) -> float:
    try:
        return func(*args)
    except InvalidArgumentError as err:
        raise click.UsageError(str(err)) from err


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    _configure_logging(verbose)


@cli.command()
@click.argument("l", type=int)
@click.argument("m", type=int)
@click.argument("theta", type=float)
@click.option(
    "--derivative",
    "-d",
    type=click.IntRange(0, 2),
    default=0,
    show_default=True,
    help="Order of the derivative with respect to theta.",
)
def plm(l: int, m: int, theta: float, derivative: int) -> None:  # noqa: E741
    """Evaluate P_l^m(cos THETA) or its THETA-derivative (THETA in radians)."""
    log.debug("plm: l=%d m=%d theta=%r derivative=%d", l, m, theta, derivative)
    value = _evaluate(_PLM_DERIVATIVES[derivative], l, m, sin(theta), cos(theta))
    click.echo(repr(value))


@cli.command()
@click.argument("l", type=int)
@click.argument("m", type=int)
def norm(l: int, m: int) -> None:  # noqa: E741
    """Evaluate the spherical harmonic normalisation factor N_l^m."""
    log.debug("norm: l=%d m=%d", l, m)
    click.echo(repr(_evaluate(ylmnorm, l, m)))


@cli.command("dlkm")
@click.argument("l", type=int)
@click.argument("k", type=int)
@click.argument("m", type=int)
@click.argument("angle", type=float)
def dlkm_command(l: int, k: int, m: int, angle: float) -> None:  # noqa: E741
    """Evaluate the Wigner small-d element d^l_km(ANGLE) (ANGLE in radians)."""
    log.debug("dlkm: l=%d k=%d m=%d angle=%r", l, k, m, angle)
    click.echo(repr(_evaluate(dlkm, l, k, m, angle)))


@cli.command()
@click.argument("l", type=int)
@click.argument("m", type=int)
@click.argument("theta", type=float)
def ylm(l: int, m: int, theta: float) -> None:  # noqa: E741
    """Evaluate Y_l^m(THETA, phi=0) = N_l^m P_l^|m|(cos THETA)."""
    log.debug("ylm: l=%d m=%d theta=%r", l, m, theta)
    norm_lm = _evaluate(ylmnorm, l, m)
    click.echo(repr(norm_lm * _evaluate(plmcos, l, abs(m), sin(theta), cos(theta))))
