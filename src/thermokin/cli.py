"""Command-line entrypoints for ThermoKin."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Dict, List, Optional

import typer

from thermokin.constants import T_STANDARD, UNIT_RATE
from thermokin.errors import InvalidInput, ThermoKinError
from thermokin.formatting import FormatPolicy, NotationMode
from thermokin.kinetics import (
    activation_energy,
    half_life,
    rate_constant_arrhenius,
    rate_constant_eyring,
)
from thermokin.models import Quantity, Reaction
from thermokin.reference import default_table, load_reference_table
from thermokin.substances import SubstanceTable
from thermokin.thermo import analyze_reaction, detailed_analysis

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

DataOption = Annotated[
    Optional[Path],
    typer.Option(
        "--data",
        envvar="THERMOKIN_DATA",
        help="JSON reference table replacing the bundled one.",
    ),
]
PrecisionOption = Annotated[int, typer.Option(help="Digits after the decimal point.")]
NotationOption = Annotated[
    NotationMode, typer.Option(case_sensitive=False, help="Number notation.")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Thermodynamic and kinetic quantities of chemical reactions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _fail(error: ThermoKinError) -> typer.Exit:
    logger.debug("Calculation failed", exc_info=error)
    typer.echo(f"Error: {error}", err=True)
    return typer.Exit(code=1)


def _table(data: Path | None) -> SubstanceTable:
    return default_table() if data is None else load_reference_table(data)


def _parse_term(term: str) -> tuple[str, float]:
    formula, sep, coefficient = term.rpartition(":")
    if not sep:
        return term, 1.0
    try:
        return formula, float(coefficient)
    except ValueError:
        raise InvalidInput(f"Invalid coefficient in {term!r}") from None


def _quantity_payload(quantity: Quantity, policy: FormatPolicy) -> Dict[str, Any]:
    payload = quantity.to_dict()
    payload["formatted"] = policy.format(quantity.value)
    return payload


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _formatted(data: Any, policy: FormatPolicy) -> Any:
    # Adds a "formatted" entry to every {"value", "unit"} mapping in a report.
    if isinstance(data, dict):
        if set(data) == {"value", "unit"}:
            return {**data, "formatted": policy.format(data["value"])}
        return {key: _formatted(value, policy) for key, value in data.items()}
    return data


@app.command()
def substance(
    formula: Annotated[str, typer.Argument(help="Formula as keyed in the table.")],
    data: DataOption = None,
) -> None:
    """Show the reference data of one substance."""
    try:
        record = _table(data).get_substance_data(formula)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json({"formula": formula, **record})


@app.command()
def substances(data: DataOption = None) -> None:
    """List the formulas available in the reference table."""
    try:
        table = _table(data)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(sorted(table))


@app.command()
def analyze(
    reactant: Annotated[
        List[str], typer.Option("--reactant", "-r", help="FORMULA[:COEF], repeatable.")
    ],
    product: Annotated[
        List[str], typer.Option("--product", "-p", help="FORMULA[:COEF], repeatable.")
    ],
    temperature: Annotated[float, typer.Option(help="Temperature (K).")] = T_STANDARD,
    detailed: Annotated[bool, typer.Option(help="Include substance data.")] = False,
    data: DataOption = None,
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Compute ΔH, ΔS, ΔG and K of a reaction."""
    try:
        policy = FormatPolicy(precision, notation)
        reaction = Reaction.from_pairs(
            [_parse_term(term) for term in reactant],
            [_parse_term(term) for term in product],
        )
        table = _table(data)
        if detailed:
            report = detailed_analysis(reaction, table, temperature).to_dict()
        else:
            report = analyze_reaction(reaction, table, temperature).to_dict()
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(_formatted(report, policy))


@app.command()
def arrhenius(
    pre_exponential: Annotated[float, typer.Argument(help="Pre-exponential factor A.")],
    activation_energy_kj: Annotated[float, typer.Argument(help="Ea (kJ/mol).")],
    temperature: Annotated[float, typer.Argument(help="Temperature (K).")],
    unit: Annotated[str, typer.Option(help="Unit of A.")] = UNIT_RATE,
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Rate constant from the Arrhenius equation."""
    try:
        policy = FormatPolicy(precision, notation)
        k = rate_constant_arrhenius(pre_exponential, activation_energy_kj, temperature, unit)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(_quantity_payload(k, policy))


@app.command()
def eyring(
    activation_enthalpy: Annotated[float, typer.Argument(help="ΔH‡ (kJ/mol).")],
    activation_entropy: Annotated[float, typer.Argument(help="ΔS‡ (J/(mol·K)).")],
    temperature: Annotated[float, typer.Argument(help="Temperature (K).")],
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Rate constant from the Eyring equation."""
    try:
        policy = FormatPolicy(precision, notation)
        k = rate_constant_eyring(activation_enthalpy, activation_entropy, temperature)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(_quantity_payload(k, policy))


@app.command("activation-energy")
def activation_energy_command(
    k1: Annotated[float, typer.Argument(help="Rate constant at T1.")],
    t1: Annotated[float, typer.Argument(help="T1 (K).")],
    k2: Annotated[float, typer.Argument(help="Rate constant at T2.")],
    t2: Annotated[float, typer.Argument(help="T2 (K).")],
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Activation energy from rate constants at two temperatures."""
    try:
        policy = FormatPolicy(precision, notation)
        ea = activation_energy(k1, t1, k2, t2)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(_quantity_payload(ea, policy))


@app.command("half-life")
def half_life_command(
    k: Annotated[float, typer.Argument(help="Rate constant.")],
    order: Annotated[int, typer.Argument(help="Reaction order (0, 1 or 2).")],
    initial_conc: Annotated[float, typer.Option(help="Initial concentration (mol/L).")] = 1.0,
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Half-life of a zero, first or second order reaction."""
    try:
        policy = FormatPolicy(precision, notation)
        t_half = half_life(k, order, initial_conc)
    except ThermoKinError as exc:
        raise _fail(exc)
    _echo_json(_quantity_payload(t_half, policy))


@app.command("format")
def format_command(
    value: Annotated[float, typer.Argument(help="Number to render.")],
    precision: PrecisionOption = 2,
    notation: NotationOption = NotationMode.AUTO,
) -> None:
    """Render a number in fixed or scientific notation."""
    try:
        text = FormatPolicy(precision, notation).format(value)
    except ThermoKinError as exc:
        raise _fail(exc)
    typer.echo(text)
