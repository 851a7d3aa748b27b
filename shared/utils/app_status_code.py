class AppStatusCode:
    # Success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    OPERATION_SUCCESSFUL = "101"

    # Client side
    INVALID_INPUT = "200"
    REQUIRED_VALIDATION_ERROR = "201"
    DUPLICATE_ADD_ERROR = "202"
    NOT_FOUND = "203"
    INVALID_STATE = "204"
    CONFLICT = "205"

    # Authentication
    AUTHENTICATION_CREDENTIALS_INVALID = "300"
    AUTHENTICATION_TOKEN_INVALID = "301"
    AUTHENTICATION_TOKEN_EXPIRED = "302"
    AUTHENTICATION_USER_INVALID = "303"
    AUTHENTICATION_USER_INACTIVE = "304"
    UNAUTHORIZED_ACTION = "305"

    # Server side
    OPERATION_FAILED = "500"
