from drf_spectacular.extensions import OpenApiAuthenticationExtension


class SubjectJWTAuthenticationScheme(OpenApiAuthenticationExtension):
    target_class = "staffing_core.iam.auth.SubjectJWTAuthentication"
    name = "BearerOrCookieJWT"

    def get_security_definition(self, auto_schema):
        return {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": (
                "Identity provider access token via `Authorization: Bearer <token>` "
                "or the HttpOnly cookie (sc_access). The `sub` claim must match an "
                "AdminUser.external_id."
            ),
        }
