"""CLI entry point for wavedisc."""
import click

from .config import POSITIONS, position_value
from .renderer import render_image


def parse_position(ctx, param, value):
    """Accept a named anchor or a float in [0, 1]."""
    try:
        return position_value(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.command()
@click.argument('input_audio', type=click.Path(exists=True))
@click.option('-o', '--output', 'output_image', default='waveform.png', help='Output image file')
@click.option('--visualizer', type=click.Choice(['amplitude', 'spectrum']), default='amplitude', help='Visualizer')
@click.option('--style', type=click.Choice(['filled', 'striped', 'gradient']), default='filled', help='Paint style')
@click.option('--width', default=800, type=click.IntRange(min=1), help='Image width in points')
@click.option('--height', default=200, type=click.IntRange(min=1), help='Image height in points')
@click.option('--scale', default=1.0, type=click.FloatRange(min=0, min_open=True), help='Pixels per point')
@click.option('--color', default='#00ff88', help='Wave color (hex)')
@click.option('--bg-color', default='#1a1a2e', help='Background color (hex)')
@click.option('--position', default='middle', callback=parse_position,
              help=f'Anchor: {", ".join(POSITIONS)} or a float in [0, 1]')
@click.option('--padding-factor', type=click.FloatRange(min=0, min_open=True), help='Vertical padding divisor')
def main(input_audio, output_image, visualizer, style, width, height, scale, color, bg_color, position, padding_factor):
    """Render a waveform image from an audio file."""
    click.echo(f"Input: {input_audio}")
    click.echo(f"Output: {output_image}")
    click.echo(f"Visualizer: {visualizer}, Style: {style}, Size: {width}x{height} @{scale}x")

    def progress(msg):
        click.echo(msg)

    try:
        success = render_image(
            input_audio=input_audio,
            output_image=output_image,
            visualizer=visualizer,
            style=style,
            width=width,
            height=height,
            scale=scale,
            color=color,
            bg_color=bg_color,
            position=position,
            padding_factor=padding_factor,
            progress_callback=progress
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    if success:
        click.echo(f"Image saved to {output_image}")
    else:
        click.echo("Error generating image", err=True)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
