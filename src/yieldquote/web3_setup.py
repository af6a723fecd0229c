"""Functions for setting up a web3py interface"""

from __future__ import annotations

from eth_typing import URI
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

DEFAULT_REQUEST_TIMEOUT = 20


def initialize_web3_with_http_provider(ethereum_node: URI | str, request_kwargs: dict | None = None) -> Web3:
    """Initialize a Web3 instance using an HTTP provider and inject a Proof of Authority (poa) middleware.

    .. note::
        The poa middleware is required for EVM compatible chains that put extra data in the block header,
        e.g. Polygon or BNB Chain.
        See more `here <https://web3py.readthedocs.io/en/stable/middleware.html#proof-of-authority>`_.

    Arguments
    ---------
    ethereum_node: URI | str
        Address of the http provider
    request_kwargs: dict | None, optional
        Keyword arguments for the requests made by the HTTPProvider.
        Defaults to a 20 second timeout.

    Returns
    -------
    Web3
        The connected web3 instance
    """
    if request_kwargs is None:
        request_kwargs = {"timeout": DEFAULT_REQUEST_TIMEOUT}
    provider = Web3.HTTPProvider(ethereum_node, request_kwargs)
    web3 = Web3(provider)
    web3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return web3
