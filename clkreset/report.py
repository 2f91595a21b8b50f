import json

import logging
logger = logging.getLogger(__name__)


__all__ = [
    'REPORT_FORMATS',
    'render_text',
    'render_json',
    'render',
]


def _onoff(on):
    return 'ON' if on else 'OFF'


def render_text(tree, hide_off=False):
    """
    Generate the report lines for a decoded ClockTree.  All frequencies are
    printed as integer Hz values.
    """
    for name, generated, output in tree.plls():
        yield '%s - Generated: %d Hz - Output: %d Hz' % (name, generated, output)

    for gen in tree.clkgens:
        if hide_off and not gen.on:
            continue
        yield 'clkgen "%s": %d Hz (%s)' % (gen.name, gen.rate, _onoff(gen.on))

    for gate in tree.axigates:
        if hide_off and not gate.on:
            continue
        yield 'axigate "%s": %s' % (gate.name, _onoff(gate.on))


def render_json(tree, hide_off=False):
    report = {
        'xtal': tree.xtal,
        'plls': [{'name': name, 'generated': generated, 'output': output}
                 for name, generated, output in tree.plls()],
        'clkgens': [{'name': gen.name, 'on': gen.on, 'rate': gen.rate}
                    for gen in tree.clkgens if gen.on or not hide_off],
        'axigates': [{'name': gate.name, 'on': gate.on}
                     for gate in tree.axigates if gate.on or not hide_off],
    }
    yield json.dumps(report, indent=2)


REPORT_FORMATS = {
    'text': render_text,
    'json': render_json,
}


def render(tree, fmt='text', hide_off=False):
    try:
        func = REPORT_FORMATS[fmt]
    except KeyError:
        raise ValueError('Unknown report format %r, must be one of: %s' %
                         (fmt, ', '.join(REPORT_FORMATS))) from None
    return list(func(tree, hide_off=hide_off))
