"""ASGI handler — translates an ASGI scope into a vanity response.

The only component that touches raw HTTP scopes. Builds a Request,
looks the path up in the configured set, renders the vanity or index
page, and sends the Response back through ASGI send().
"""

from vanityurls._internal.asgi import Receive, Scope, Send
from vanityurls.config import VanityConfig
from vanityurls.errors import HTTPError, NotFound, RenderError
from vanityurls.http.request import Request
from vanityurls.http.response import Response
from vanityurls.server.errors import handle_http_error, handle_internal_error, handle_render_error
from vanityurls.server.sender import send_response
from vanityurls.templating.pages import Pages, VanityPage


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    config: VanityConfig,
    pages: Pages,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = dispatch(request, config=config, pages=pages)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except RenderError as exc:
        response = handle_render_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send, head=request.is_head)


def dispatch(request: Request, *, config: VanityConfig, pages: Pages) -> Response:
    """Route *request* to the vanity page, the index page, or a 404.

    Raises:
        NotFound: If no configured path matches and the path is not ``/``.
        RenderError: If a page template fails to render.
    """
    pc, subpath = config.paths.find(request.path)
    if pc is None:
        if request.path == "/":
            return serve_index(request, config=config, pages=pages)
        raise NotFound()

    html = pages.render_vanity(
        VanityPage(
            import_path=effective_host(request, config) + pc.path,
            subpath=subpath,
            repo=pc.repo,
            display=pc.display,
            vcs=pc.vcs,
        )
    )
    # Only vanity pages are cacheable; index and 404 go out without it.
    return Response(body=html).with_header("Cache-Control", config.cache_control)


def serve_index(request: Request, *, config: VanityConfig, pages: Pages) -> Response:
    """List every configured import path under the effective host."""
    host = effective_host(request, config)
    handlers = [host + pc.path for pc in config.paths]
    return Response(body=pages.render_index(host, handlers))


def effective_host(request: Request, config: VanityConfig) -> str:
    """The configured host override, else the host the client asked for."""
    return config.host or request.host
