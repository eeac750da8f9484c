"""Transport layer components for the Massdriver HTTP clients.

Transport layers wrap an httpx transport to add behaviour to every request.
The SDK deliberately ships no retry, pagination or rate limiting layers:
each service call is exactly one HTTP request.

Modules:
    headers: Header injection (auth, content negotiation)

Example:
    ```python
    from massdriver.transport import HeaderInjectingTransport, default_headers

    transport = HeaderInjectingTransport(
        wrapped_transport=httpx.HTTPTransport(),
        headers=default_headers(config),
    )
    ```
"""

from massdriver.transport.headers import HeaderInjectingTransport, default_headers

__all__ = ["HeaderInjectingTransport", "default_headers"]
