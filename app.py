from flask import Flask, request, jsonify
import logging
import threading

from keypad_chain import DEPTH_PRESETS, MAX_DEPTH, PressCounter, parse_codes, solve_codes

app = Flask(__name__)
logger = logging.getLogger(__name__)

DEFAULT_DEPTH = DEPTH_PRESETS['part1']

# Transitions are a pure function of (depth, from, to), so one cache serves every request
COUNTER = PressCounter()
COUNTER_LOCK = threading.Lock()


def resolve_depth(data: dict) -> int:
    if 'preset' in data and 'depth' in data:
        raise ValueError("give either 'depth' or 'preset', not both")
    if 'preset' in data:
        preset = data['preset']
        if preset not in DEPTH_PRESETS:
            raise ValueError(f"unknown preset {preset!r}; expected one of {sorted(DEPTH_PRESETS)}")
        return DEPTH_PRESETS[preset]
    raw = data.get('depth', DEFAULT_DEPTH)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError('depth must be an integer')
    if raw < 0:
        raise ValueError('depth must be non-negative')
    if raw > MAX_DEPTH:
        raise ValueError(f'depth must be at most {MAX_DEPTH}')
    return raw


def resolve_codes(data: dict) -> list[str]:
    raw = data.get('codes')
    if isinstance(raw, str):
        codes = parse_codes(raw)
    elif isinstance(raw, list) and all(isinstance(c, str) for c in raw):
        codes = parse_codes('\n'.join(raw))
    else:
        raise ValueError("'codes' must be a list of strings or newline-separated text")
    if not codes:
        raise ValueError('no codes given')
    return codes


@app.get('/api/presets')
def api_presets():
    return jsonify({'presets': DEPTH_PRESETS, 'default_depth': DEFAULT_DEPTH, 'max_depth': MAX_DEPTH})


@app.post('/api/complexity')
def api_complexity():
    try:
        data = request.get_json(force=True, silent=True)
        if not isinstance(data, dict):
            raise ValueError('request body must be a JSON object')
        depth = resolve_depth(data)
        codes = resolve_codes(data)
        with COUNTER_LOCK:
            results = solve_codes(codes, depth, COUNTER)
    except ValueError as e:
        return jsonify({'status': 'error', 'message': str(e)}), 400

    total = sum(r.complexity for r in results)
    logger.debug('solved %d codes at depth %d, total %d', len(results), depth, total)
    return jsonify({
        'status': 'ok',
        'depth': depth,
        'total': total,
        'results': [r.to_dict() for r in results],
    })


if __name__ == '__main__':
    app.run(debug=True)
