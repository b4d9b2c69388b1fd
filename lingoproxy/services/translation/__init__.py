"""Translation provider clients and the gateway that fronts them.

Use explicit imports:
    from lingoproxy.services.translation.gateway import TranslationGateway
"""
