"""MIDI command implementations."""

import click

from launchi3.devices import get_registry
from launchi3.midi import MidiPorts


@click.group(name="midi")
def midi_group():
    """MIDI device commands."""
    pass


@midi_group.command(name="list")
def list_midi():
    """List available MIDI ports and any detected Launchpad."""
    ports = MidiPorts.list_ports()

    click.echo("MIDI Input Ports:\n")
    if not ports["input"]:
        click.echo("  No MIDI input ports found.")
    else:
        for i, port in enumerate(ports["input"]):
            click.echo(f"  [{i}] {port}")

    click.echo("\nMIDI Output Ports:\n")
    if not ports["output"]:
        click.echo("  No MIDI output ports found.")
    else:
        for i, port in enumerate(ports["output"]):
            click.echo(f"  [{i}] {port}")

    found = get_registry().detect_ports(ports["input"], ports["output"])
    if found is None:
        click.echo("\nNo supported Launchpad detected.")
    else:
        device_config, input_port, output_port = found
        click.echo(f"\nDetected {device_config.display_name}:")
        click.echo(f"  input:  {input_port}")
        click.echo(f"  output: {output_port}")
