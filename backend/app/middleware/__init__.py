"""
Bills Demo Backend: Middleware Package
======================================

    Request → [AccessLog] → Route Handler

AccessLogMiddleware is the only middleware: it times and logs each request.
"""
