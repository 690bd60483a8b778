"""Built-in translations served when the store cannot be reached.

Also defines the expected key set used for progress and missing-key
reporting.
"""

from typing import Dict, Tuple

from localization.i18n.models import BundleSource, TranslationBundle, TranslationValue

FR_TRANSLATIONS: Dict[str, str] = {
    "nav.home": "Accueil",
    "nav.menu": "Menu",
    "nav.cart": "Panier",
    "nav.orders": "Commandes",
    "nav.profile": "Profil",
    "nav.loyalty": "Fidélité",
    "nav.promotions": "Promotions",
    "ui.loading": "Chargement...",
    "ui.error": "Erreur",
    "ui.success": "Succès",
    "ui.cancel": "Annuler",
    "ui.confirm": "Confirmer",
    "ui.save": "Enregistrer",
    "ui.edit": "Modifier",
    "ui.delete": "Supprimer",
    "ui.search": "Rechercher",
    "ui.filter": "Filtrer",
    "ui.sort": "Trier",
    "product.addToCart": "Ajouter au panier",
    "product.outOfStock": "Rupture de stock",
    "product.price": "Prix",
    "product.description": "Description",
    "product.ingredients": "Ingrédients",
    "product.allergens": "Allergènes",
    "order.status.pending": "En attente",
    "order.status.confirmed": "Confirmée",
    "order.status.preparing": "En préparation",
    "order.status.ready": "Prête",
    "order.status.delivering": "En livraison",
    "order.status.delivered": "Livrée",
    "order.status.cancelled": "Annulée",
    "cart.empty": "Votre panier est vide",
    "cart.total": "Total",
    "cart.subtotal": "Sous-total",
    "cart.tax": "TVA",
    "cart.delivery": "Livraison",
    "cart.checkout": "Passer commande",
    "payment.methods": "Moyens de paiement",
    "payment.card": "Carte bancaire",
    "payment.cash": "Espèces",
    "payment.mobile": "Paiement mobile",
    "payment.processing": "Traitement en cours...",
    "payment.success": "Paiement réussi",
    "payment.failed": "Paiement échoué",
    "delivery.address": "Adresse de livraison",
    "delivery.time": "Heure de livraison",
    "delivery.fee": "Frais de livraison",
    "delivery.tracking": "Suivi de livraison",
    "loyalty.points": "Points de fidélité",
    "loyalty.rewards": "Récompenses",
    "loyalty.levels": "Niveaux",
    "loyalty.history": "Historique",
    "promotions.active": "Promotions en cours",
    "promotions.code": "Code promo",
    "promotions.discount": "Remise",
    "promotions.expires": "Expire le",
    "msg.welcome": "Bienvenue sur Universal Eats",
    "msg.thankYou": "Merci pour votre commande",
    "msg.goodbye": "À bientôt !",
    "msg.languageChanged": "Langue changée avec succès",
    "msg.marketChanged": "Marché changé avec succès",
}

AR_TRANSLATIONS: Dict[str, str] = {
    "nav.home": "الرئيسية",
    "nav.menu": "القائمة",
    "nav.cart": "السلة",
    "nav.orders": "الطلبات",
    "nav.profile": "الملف الشخصي",
    "nav.loyalty": "برنامج الولاء",
    "nav.promotions": "العروض",
    "ui.loading": "جاري التحميل...",
    "ui.error": "خطأ",
    "ui.success": "نجح",
    "ui.cancel": "إلغاء",
    "ui.confirm": "تأكيد",
    "ui.save": "حفظ",
    "ui.edit": "تعديل",
    "ui.delete": "حذف",
    "ui.search": "بحث",
    "ui.filter": "تصفية",
    "ui.sort": "ترتيب",
    "product.addToCart": "أضف إلى السلة",
    "product.outOfStock": "نفدت الكمية",
    "product.price": "السعر",
    "product.description": "الوصف",
    "product.ingredients": "المكونات",
    "product.allergens": "مسببات الحساسية",
    "order.status.pending": "في الانتظار",
    "order.status.confirmed": "مؤكد",
    "order.status.preparing": "قيد التحضير",
    "order.status.ready": "جاهز",
    "order.status.delivering": "جاري التوصيل",
    "order.status.delivered": "تم التوصيل",
    "order.status.cancelled": "ملغى",
    "cart.empty": "سلة التسوق فارغة",
    "cart.total": "المجموع",
    "cart.subtotal": "المجموع الفرعي",
    "cart.tax": "الضريبة",
    "cart.delivery": "التوصيل",
    "cart.checkout": "إتمام الطلب",
    "payment.methods": "وسائل الدفع",
    "payment.card": "بطاقة ائتمان",
    "payment.cash": "نقد",
    "payment.mobile": "دفع عبر الهاتف",
    "payment.processing": "جاري المعالجة...",
    "payment.success": "تم الدفع بنجاح",
    "payment.failed": "فشل الدفع",
    "delivery.address": "عنوان التوصيل",
    "delivery.time": "وقت التوصيل",
    "delivery.fee": "رسوم التوصيل",
    "delivery.tracking": "تتبع التوصيل",
    "loyalty.points": "نقاط الولاء",
    "loyalty.rewards": "المكافآت",
    "loyalty.levels": "المستويات",
    "loyalty.history": "التاريخ",
    "promotions.active": "العروض النشطة",
    "promotions.code": "كود الخصم",
    "promotions.discount": "الخصم",
    "promotions.expires": "ينتهي في",
    "msg.welcome": "مرحبا بكم في Universal Eats",
    "msg.thankYou": "شكرا لطلبكم",
    "msg.goodbye": "إلى اللقاء!",
    "msg.languageChanged": "تم تغيير اللغة بنجاح",
    "msg.marketChanged": "تم تغيير السوق بنجاح",
}

EN_TRANSLATIONS: Dict[str, str] = {
    "nav.home": "Home",
    "nav.menu": "Menu",
    "nav.cart": "Cart",
    "nav.orders": "Orders",
    "nav.profile": "Profile",
    "nav.loyalty": "Loyalty",
    "nav.promotions": "Promotions",
    "ui.loading": "Loading...",
    "ui.error": "Error",
    "ui.success": "Success",
    "ui.cancel": "Cancel",
    "ui.confirm": "Confirm",
    "ui.save": "Save",
    "ui.edit": "Edit",
    "ui.delete": "Delete",
    "ui.search": "Search",
    "ui.filter": "Filter",
    "ui.sort": "Sort",
    "product.addToCart": "Add to Cart",
    "product.outOfStock": "Out of Stock",
    "product.price": "Price",
    "product.description": "Description",
    "product.ingredients": "Ingredients",
    "product.allergens": "Allergens",
    "order.status.pending": "Pending",
    "order.status.confirmed": "Confirmed",
    "order.status.preparing": "Preparing",
    "order.status.ready": "Ready",
    "order.status.delivering": "Delivering",
    "order.status.delivered": "Delivered",
    "order.status.cancelled": "Cancelled",
    "cart.empty": "Your cart is empty",
    "cart.total": "Total",
    "cart.subtotal": "Subtotal",
    "cart.tax": "Tax",
    "cart.delivery": "Delivery",
    "cart.checkout": "Checkout",
    "payment.methods": "Payment Methods",
    "payment.card": "Credit Card",
    "payment.cash": "Cash",
    "payment.mobile": "Mobile Payment",
    "payment.processing": "Processing...",
    "payment.success": "Payment successful",
    "payment.failed": "Payment failed",
    "delivery.address": "Delivery Address",
    "delivery.time": "Delivery Time",
    "delivery.fee": "Delivery Fee",
    "delivery.tracking": "Delivery Tracking",
    "loyalty.points": "Loyalty Points",
    "loyalty.rewards": "Rewards",
    "loyalty.levels": "Levels",
    "loyalty.history": "History",
    "promotions.active": "Active Promotions",
    "promotions.code": "Promo Code",
    "promotions.discount": "Discount",
    "promotions.expires": "Expires on",
    "msg.welcome": "Welcome to Universal Eats",
    "msg.thankYou": "Thank you for your order",
    "msg.goodbye": "See you soon!",
    "msg.languageChanged": "Language changed successfully",
    "msg.marketChanged": "Market changed successfully",
}

ES_TRANSLATIONS: Dict[str, str] = {
    "nav.home": "Inicio",
    "nav.menu": "Menú",
    "nav.cart": "Carrito",
    "nav.orders": "Pedidos",
    "nav.profile": "Perfil",
    "nav.loyalty": "Fidelidad",
    "nav.promotions": "Promociones",
    "ui.loading": "Cargando...",
    "ui.error": "Error",
    "ui.success": "Éxito",
    "ui.cancel": "Cancelar",
    "ui.confirm": "Confirmar",
    "ui.save": "Guardar",
    "ui.edit": "Editar",
    "ui.delete": "Eliminar",
    "ui.search": "Buscar",
    "ui.filter": "Filtrar",
    "ui.sort": "Ordenar",
    "product.addToCart": "Agregar al carrito",
    "product.outOfStock": "Agotado",
    "product.price": "Precio",
    "product.description": "Descripción",
    "product.ingredients": "Ingredientes",
    "product.allergens": "Alérgenos",
    "order.status.pending": "Pendiente",
    "order.status.confirmed": "Confirmado",
    "order.status.preparing": "Preparando",
    "order.status.ready": "Listo",
    "order.status.delivering": "Entregando",
    "order.status.delivered": "Entregado",
    "order.status.cancelled": "Cancelado",
    "cart.empty": "Tu carrito está vacío",
    "cart.total": "Total",
    "cart.subtotal": "Subtotal",
    "cart.tax": "Impuesto",
    "cart.delivery": "Entrega",
    "cart.checkout": "Pagar",
    "payment.methods": "Métodos de pago",
    "payment.card": "Tarjeta de crédito",
    "payment.cash": "Efectivo",
    "payment.mobile": "Pago móvil",
    "payment.processing": "Procesando...",
    "payment.success": "Pago exitoso",
    "payment.failed": "Pago fallido",
    "delivery.address": "Dirección de entrega",
    "delivery.time": "Hora de entrega",
    "delivery.fee": "Costo de entrega",
    "delivery.tracking": "Seguimiento de entrega",
    "loyalty.points": "Puntos de fidelidad",
    "loyalty.rewards": "Recompensas",
    "loyalty.levels": "Niveles",
    "loyalty.history": "Historial",
    "promotions.active": "Promociones activas",
    "promotions.code": "Código promocional",
    "promotions.discount": "Descuento",
    "promotions.expires": "Expira el",
    "msg.welcome": "Bienvenido a Universal Eats",
    "msg.thankYou": "Gracias por tu pedido",
    "msg.goodbye": "¡Hasta pronto!",
    "msg.languageChanged": "Idioma cambiado exitosamente",
    "msg.marketChanged": "Mercado cambiado exitosamente",
}

BUILTIN_TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "fr": FR_TRANSLATIONS,
    "ar": AR_TRANSLATIONS,
    "en": EN_TRANSLATIONS,
    "es": ES_TRANSLATIONS,
}

EXPECTED_TRANSLATION_KEYS: Tuple[str, ...] = tuple(FR_TRANSLATIONS)


def build_default_bundle(language: str, market: str) -> TranslationBundle:
    """Build the built-in bundle for a pair.

    Languages without built-in data get the French texts so the UI stays
    usable.

    Args:
        language: Language code.
        market: Market code.

    Returns:
        TranslationBundle with source BUILTIN.
    """
    texts = BUILTIN_TRANSLATIONS.get(language, FR_TRANSLATIONS)
    return TranslationBundle(
        language=language,
        market=market,
        translations={
            key: TranslationValue(key=key, value=text) for key, text in texts.items()
        },
        source=BundleSource.BUILTIN,
    )
