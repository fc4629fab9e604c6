################################################################################
# Copyright (c) 2026 Wind River Systems, Inc.
#
# SPDX-License-Identifier: Apache-2.0
#
################################################################################


class S3CoreDumpException(Exception):
    """Base exception for the core dump uploader.

    Subclasses define a ``message`` template that is formatted with the
    keyword arguments given to the constructor.
    """
    message = "An unknown exception occurred."

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs
        if not message:
            try:
                message = self.message % kwargs
            except KeyError:
                message = self.message
        self.message = message
        super(S3CoreDumpException, self).__init__(message)

    def __str__(self):
        return self.message


class ConfigurationError(S3CoreDumpException):
    message = "Invalid configuration: %(reason)s"


class ProviderError(S3CoreDumpException):
    message = "%(reason)s"


class ResolutionError(S3CoreDumpException):
    message = "No valid credential provider in chain: %(details)s"

    def __init__(self, failures):
        self.failures = list(failures)
        details = "; ".join("%s: %s" % (name, reason)
                            for name, reason in self.failures)
        super(ResolutionError, self).__init__(details=details)


class TransportError(S3CoreDumpException):
    message = "Transport failure: %(reason)s"


class AuthorizationError(S3CoreDumpException):
    message = "Request not authorized: %(reason)s"
