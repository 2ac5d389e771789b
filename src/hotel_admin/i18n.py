"""Admin UI messages in Turkish and English."""

DEFAULT_LANGUAGE = "en"

MESSAGES = {
    "title_required": {
        "tr": "Başlık alanları zorunludur",
        "en": "Title fields are required",
    },
    "name_required": {
        "tr": "Oda tipi adı alanları zorunludur",
        "en": "Room type name fields are required",
    },
    "service_added": {
        "tr": "Hizmet başarıyla eklendi. Görselleri eklemek için galeri düzenleme sayfasına yönlendiriliyorsunuz.",
        "en": "Service added successfully. You are being redirected to the gallery editing page.",
    },
    "service_add_failed": {
        "tr": "Hizmet eklenirken bir hata oluştu",
        "en": "Error while adding service",
    },
    "room_type_added": {
        "tr": "Oda tipi başarıyla eklendi",
        "en": "Room type added successfully",
    },
    "room_type_updated": {
        "tr": "Oda tipi başarıyla güncellendi",
        "en": "Room type updated successfully",
    },
    "room_type_save_failed": {
        "tr": "Oda tipi kaydedilirken bir hata oluştu",
        "en": "Error while saving room type",
    },
    "generic_error": {
        "tr": "Bir hata oluştu",
        "en": "An error occurred",
    },
    "already_submitting": {
        "tr": "Form zaten gönderiliyor",
        "en": "The form is already being submitted",
    },
}


def translate(key: str, lang: str) -> str:
    """Message for ``lang``; anything other than Turkish gets English."""
    texts = MESSAGES[key]
    return texts.get(lang, texts[DEFAULT_LANGUAGE])
