import json

import pytest

CLI_USER_AGENTS = ['curl/7.26.0', 'Wget/1.13.4 (linux-gnu)', 'fetch libfetch/2.0']


def to_json(key, value):
    return '{\n  "%s": "%s"\n}' % (key, value)


@pytest.mark.parametrize('user_agent', CLI_USER_AGENTS)
def test_root_plain_for_cli_clients(client, user_agent):
    response = client.get('/', headers={'User-Agent': user_agent})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == '127.0.0.1\n'
    assert response.mimetype == 'text/plain'


def test_key_with_json_suffix(client):
    response = client.get('/x-ifconfig-ip.json', headers={'User-Agent': ''})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == to_json('x-ifconfig-ip', '127.0.0.1')
    assert response.mimetype == 'application/json'


def test_root_json_via_accept(client):
    response = client.get('/', headers={'Accept': 'application/json', 'User-Agent': ''})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == to_json('x-ifconfig-ip', '127.0.0.1')


def test_unknown_key_plain(client):
    response = client.get('/foo', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 404
    assert response.get_data(as_text=True) == 'no value found for: foo'


def test_unknown_key_json(client):
    response = client.get('/foo', headers={'Accept': 'application/json', 'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 404
    assert response.get_data(as_text=True) == '{\n  "error": "no value found for: foo"\n}'


def test_all_json(client):
    # Only Accept-Encoding is sent by the client; Host is never part of the view
    client.environ_base.pop('HTTP_USER_AGENT', None)
    response = client.get('/all.json', headers={'Accept-Encoding': 'gzip'})
    assert response.status_code == 200
    body = response.get_data(as_text=True)

    assert body == (
        '{\n  "Accept-Encoding": [\n    "gzip"\n  ],'
        '\n  "X-Ifconfig-Country": [\n    ""\n  ],'
        '\n  "X-Ifconfig-Hostname": [\n    "localhost, localhost.localdomain"\n  ],'
        '\n  "X-Ifconfig-Ip": [\n    "127.0.0.1"\n  ]\n}'
    )
    assert set(json.loads(body)) == {
        'Accept-Encoding',
        'X-Ifconfig-Country',
        'X-Ifconfig-Hostname',
        'X-Ifconfig-Ip'
    }


def test_host_header_is_not_a_key(client):
    response = client.get('/host', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 404
    assert response.get_data(as_text=True) == 'no value found for: host'


def test_all_is_json_without_suffix(client):
    response = client.get('/all', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 200
    assert response.mimetype == 'application/json'
    assert json.loads(response.get_data(as_text=True))['X-Ifconfig-Ip'] == ['127.0.0.1']


def test_key_lookup_is_case_insensitive(client):
    response = client.get('/X-Ifconfig-IP.json')
    assert response.get_data(as_text=True) == to_json('x-ifconfig-ip', '127.0.0.1')


def test_request_header_lookup(client):
    response = client.get('/user-agent', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == 'curl/7.26.0\n'


def test_hostname_lookup(client):
    response = client.get('/x-ifconfig-hostname', headers={'User-Agent': 'curl/7.26.0'})
    assert response.get_data(as_text=True) == 'localhost, localhost.localdomain\n'


def test_country_empty_when_unconfigured(client):
    response = client.get('/x-ifconfig-country', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == '\n'


def test_country_from_lookup(make_app):
    app = make_app(reverse_resolver=None, country_lookup=lambda ip: 'NO')
    response = app.test_client().get('/x-ifconfig-country.json')
    assert response.get_data(as_text=True) == to_json('x-ifconfig-country', 'NO')


def test_remote_address_with_port(client):
    response = client.get('/', environ_base={'REMOTE_ADDR': '1.3.3.7:9999'})
    assert response.get_data(as_text=True) == '1.3.3.7\n'


def test_trusted_header(client):
    response = client.get('/', headers={'X-Real-IP': '1.3.3.7'})
    assert response.get_data(as_text=True) == '1.3.3.7\n'


def test_trusted_header_disabled(make_app):
    app = make_app(IP_HEADER='')
    response = app.test_client().get('/', headers={'X-Real-IP': '1.3.3.7'})
    assert response.get_data(as_text=True) == '127.0.0.1\n'


def test_unresolvable_ip_plain(client):
    response = client.get('/', environ_base={'REMOTE_ADDR': 'unknown'})
    assert response.status_code == 404
    assert response.get_data(as_text=True) == 'no valid IP found'


def test_unresolvable_ip_json(client):
    response = client.get('/', environ_base={'REMOTE_ADDR': 'unknown'}, headers={'Accept': 'application/json'})
    assert response.status_code == 404
    assert response.get_data(as_text=True) == '{\n  "error": "no valid IP found"\n}'


def test_unresolvable_ip_on_all_is_json(client):
    response = client.get('/all', environ_base={'REMOTE_ADDR': 'unknown'}, headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 404
    assert json.loads(response.get_data(as_text=True)) == {'error': 'no valid IP found'}


@pytest.mark.parametrize('headers', [
    {'Accept': 'text/plain'},
    {'User-Agent': 'curl/7.26.0'},
    {'Accept': 'text/html', 'User-Agent': 'Wget/1.13.4 (linux-gnu)'},
])
def test_json_suffix_always_json(client, headers):
    response = client.get('/user-agent.json', headers=headers)
    assert response.mimetype == 'application/json'
    json.loads(response.get_data(as_text=True))


def test_unmatched_route_uses_negotiated_format(client):
    response = client.get('/a/b', headers={'Accept': 'application/json'})
    assert response.status_code == 404
    assert 'error' in json.loads(response.get_data(as_text=True))


@pytest.mark.parametrize('query, expected', [
    ('', 'curl http://localhost\n'),
    ('?cmd=foo', 'curl http://localhost\n'),
    ('?cmd=wget', 'wget -qO - http://localhost\n'),
    ('?cmd=fetch', 'fetch -qo - http://localhost\n'),
])
def test_command_suggestion(client, query, expected):
    response = client.get('/cmd' + query, headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == expected


def test_command_suggestion_json_with_public_url(make_app):
    app = make_app(reverse_resolver=None, PUBLIC_URL='https://ifconfig.example/')
    response = app.test_client().get('/cmd.json?cmd=wget')
    assert json.loads(response.get_data(as_text=True)) == {
        'args': '-qO -',
        'command': 'wget -qO - https://ifconfig.example',
        'name': 'wget'
    }


def test_internal_failure_is_plain_500(app, client, monkeypatch):
    def boom(req, key):
        raise RuntimeError('unexpected')

    monkeypatch.setattr(app.introspector, 'lookup', boom)
    response = client.get('/foo', headers={'Accept': 'application/json'})
    assert response.status_code == 500
    assert response.get_data(as_text=True) == 'internal server error'


def test_rendering_failure_is_500(app, client, monkeypatch):
    monkeypatch.setattr(app.introspector, 'all_values', lambda req: {'X-Broken': [object()]})
    response = client.get('/all.json')
    assert response.status_code == 500
    assert response.get_data(as_text=True) == 'internal server error'


def test_head_request(client):
    response = client.head('/', headers={'User-Agent': 'curl/7.26.0'})
    assert response.status_code == 200
    assert response.get_data() == b''


@pytest.mark.parametrize('path', ['/', '/foo', '/all.json', '/x-ifconfig-ip.json', '/cmd', '/x-ifconfig-country'])
@pytest.mark.parametrize('headers', [
    {'User-Agent': 'curl/7.26.0'},
    {'Accept': 'application/json'},
])
def test_bodies_have_at_most_one_trailing_newline(client, path, headers):
    body = client.get(path, headers=headers).get_data(as_text=True)
    stripped = body[:-1] if body.endswith('\n') else body
    assert stripped == stripped.rstrip()
