"""
Year Wallpaper HTTP Server

Serves full-year calendar wallpapers rendered on demand. Every GET builds a
fresh image from the query string; nothing is cached between requests.

    GET /api/wallpaper?model=iphone_se&style=squares&theme=pure_white&lang=en
"""

import argparse
import traceback
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlparse

from yearwall import config
from yearwall.logger import log, log_error, log_request, set_silent_mode
from yearwall.params import parse_params
from yearwall.wallpaper import render_wallpaper_png

WALLPAPER_PATHS = ("/", "/api/wallpaper", "/wallpaper.png")


class WallpaperHandler(BaseHTTPRequestHandler):
    """HTTP request handler rendering one wallpaper per request"""

    def do_GET(self):
        """Handle GET requests - render the wallpaper for the query string"""
        parsed_url = urlparse(self.path)

        if parsed_url.path in WALLPAPER_PATHS:
            self.serve_wallpaper(parsed_url.query)
        else:
            self.send_error(404, "Not found")

    def do_HEAD(self):
        """Handle HEAD requests - same headers as GET without the body"""
        parsed_url = urlparse(self.path)

        if parsed_url.path in WALLPAPER_PATHS:
            self.serve_wallpaper(parsed_url.query, include_body=False)
        else:
            self.send_error(404, "Not found")

    def serve_wallpaper(self, query_string, include_body=True):
        """Render and send the PNG with caching disabled"""
        try:
            params = parse_params(parse_qs(query_string))
            image_bytes = render_wallpaper_png(params)
        except Exception as e:
            log_error(f"Error rendering wallpaper: {e}")
            traceback.print_exc()
            self.send_error(500, f"Wallpaper generation error: {e}")
            return

        self.send_response(200)
        self.send_header("Content-Type", "image/png")
        self.send_header("Content-Length", str(len(image_bytes)))
        self.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
        self.send_header("Pragma", "no-cache")
        self.send_header("Expires", "0")
        self.end_headers()
        if include_body:
            self.wfile.write(image_bytes)

    def log_message(self, format, *args):
        """Override to route access logs through the yearwall logger"""
        log_request(format % args)


def create_server(host=None, port=None):
    """Bind a threading HTTP server; port 0 picks a free port"""
    host = config.HOST if host is None else host
    port = config.PORT if port is None else port
    return ThreadingHTTPServer((host, port), WallpaperHandler)


def run_server(port=None, host=None):
    """Run the wallpaper HTTP server until interrupted"""
    httpd = create_server(host, port)
    host, port = httpd.server_address[:2]

    log(f"Year Wallpaper Server starting on http://{host}:{port}")
    log(f"  http://{host}:{port}/api/wallpaper - Rendered wallpaper PNG")
    log("Press Ctrl+C to stop the server")

    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        log("\nShutting down wallpaper server...")
    finally:
        httpd.server_close()


def main():
    """Command line interface for HTTP server"""
    parser = argparse.ArgumentParser(description="Year wallpaper HTTP server")
    parser.add_argument(
        "--port", type=int, default=config.PORT,
        help=f"Port number (default: {config.PORT})",
    )
    parser.add_argument(
        "--host", default=config.HOST, help=f"Host address (default: {config.HOST})"
    )
    parser.add_argument(
        "--silent", action="store_true", default=config.SILENT,
        help="Suppress log output",
    )

    args = parser.parse_args()
    set_silent_mode(args.silent)

    run_server(args.port, args.host)


if __name__ == "__main__":
    main()
