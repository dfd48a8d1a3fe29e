def swagger_template(app=None):
    swagger = (app.config.get("SWAGGER") if app else None) or {}
    title = swagger.get("title", "Code Vote API")
    version = swagger.get("version", "1.0.0")

    return {
        "swagger": "2.0",
        "info": {"title": title, "version": version},
        "securityDefinitions": {
            "BasicAuth": {
                "type": "basic",
                "description": "Admin credentials (ADMIN_USER / ADMIN_PASS)"
            }
        },
        "definitions": {
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "error": {
                        "type": "object",
                        "properties": {
                            "code": {"type": "string", "example": "ALREADY_USED"},
                            "message": {"type": "string", "example": "kode sudah digunakan"},
                            "details": {"type": "object"}
                        }
                    },
                    "request_id": {"type": "string"}
                }
            }
        }
    }
