import unittest

from RawHTTP import (ClientConfig, HTTPClientError, HTTPError, InvalidResponseError,
                     NetworkError, RequestTimeoutError)


class TestExceptions(unittest.TestCase):
    def test_messages(self):
        self.assertEqual('Network error: boom', str(NetworkError('boom')))
        self.assertEqual('Invalid response: bad', str(InvalidResponseError('bad')))
        self.assertEqual('HTTP 418 error: teapot', str(HTTPError(418, 'teapot')))

    def test_hierarchy(self):
        self.assertTrue(issubclass(RequestTimeoutError, NetworkError))
        for cls in (NetworkError, InvalidResponseError, HTTPError):
            self.assertTrue(issubclass(cls, HTTPClientError))

    def test_http_error_defaults(self):
        error = HTTPError(503, 'down')
        self.assertEqual([], error.headers)
        self.assertEqual('', error.body)
        self.assertEqual('down', error.message)


class TestClientConfig(unittest.TestCase):
    def test_defaults(self):
        config = ClientConfig()
        self.assertEqual(80, config.port)
        self.assertEqual(10.0, config.timeout)
        self.assertEqual('application/json', config.content_type)
        self.assertIsNone(config.user_agent)

    def test_invalid_values(self):
        for kwargs in [dict(port=0), dict(port=70000), dict(timeout=0),
                       dict(recv_buffer_size=0), dict(content_type='')]:
            with self.assertRaises(ValueError):
                ClientConfig(**kwargs)


if __name__ == '__main__':
    unittest.main()
