# cinefav/client/i18n.py

MESSAGES = {
    "en": {
        "auth.registerSuccess": "Registration successful!",
        "auth.pleaseLogin": "Please login with your new account.",
        "auth.loginFailed": "Login failed",
        "auth.invalidCredentials": "Invalid email or password",
        "auth.authRequired": "Authentication required",
        "auth.loginToFavorite": "Please login to add movies to your favorites",
        "auth.sessionExpired": "Session expired",
        "auth.pleaseLoginAgain": "Please login again",
        "movies.success": "Success",
        "movies.addedToFavorites": "Movie added to favorites",
        "movies.removedFromFavorites": "Movie removed from favorites",
        "movies.dataUnavailable": "Movie data not available",
        "errors.unexpectedError": "An unexpected error occurred",
        "errors.tryAgain": "Please try again",
        "errors.loadDetailsFailed": "Failed to load movie details",
        "errors.requiredField": "Required field",
        "errors.passwordMismatch": "Passwords do not match",
        "errors.uploadFailed": "Failed to upload photo",
        "errors.languageChangeFailed": "Failed to change language",
    },
    "pt": {
        "auth.registerSuccess": "Cadastro realizado com sucesso!",
        "auth.pleaseLogin": "Faça login com sua nova conta.",
        "auth.loginFailed": "Falha no login",
        "auth.invalidCredentials": "Email ou senha inválidos",
        "auth.authRequired": "Autenticação necessária",
        "auth.loginToFavorite": "Faça login para adicionar filmes aos favoritos",
        "auth.sessionExpired": "Sessão expirada",
        "auth.pleaseLoginAgain": "Faça login novamente",
        "movies.success": "Sucesso",
        "movies.addedToFavorites": "Filme adicionado aos favoritos",
        "movies.removedFromFavorites": "Filme removido dos favoritos",
        "movies.dataUnavailable": "Dados do filme indisponíveis",
        "errors.unexpectedError": "Ocorreu um erro inesperado",
        "errors.tryAgain": "Por favor, tente novamente",
        "errors.loadDetailsFailed": "Falha ao carregar detalhes do filme",
        "errors.requiredField": "Campo obrigatório",
        "errors.passwordMismatch": "As senhas não coincidem",
        "errors.uploadFailed": "Falha ao enviar foto",
        "errors.languageChangeFailed": "Falha ao alterar idioma",
    },
}

SUPPORTED_LANGUAGES = tuple(MESSAGES.keys())

# 앱 언어 코드 → 카탈로그 API 언어 코드
CATALOG_LANGUAGES = {"pt": "pt-BR", "en": "en-US"}


def translate(language: str, key: str) -> str:
    """번역 문구 조회, 없으면 영어, 그것도 없으면 key 그대로"""
    messages = MESSAGES.get(language, MESSAGES["en"])
    return messages.get(key) or MESSAGES["en"].get(key, key)
