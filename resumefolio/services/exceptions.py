class PortfolioServiceError(Exception):
    pass


class PortfolioNotFoundError(PortfolioServiceError):
    pass


class InvalidUserIdError(PortfolioServiceError):
    pass


class PortfolioConflictError(PortfolioServiceError):
    pass


class TemplateNotFoundError(PortfolioServiceError):
    pass
