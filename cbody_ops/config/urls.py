""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..auth.handler import auth_namespace
from ..admins.handler import admin_namespace
from ..users.handler import user_namespace
from ..therapists.handler import therapist_namespace
from ..catalogue.handler import catalogue_namespace
from ..panels.handler import panel_namespace
from ..orders.handler import order_namespace
from ..finance.handler import finance_namespace
from ..media.handler import media_namespace
from ..chats.handler import chat_namespace
from ..reviews.handler import review_namespace
from ..reports.handler import report_namespace
from ..configs.handler import config_namespace
from ..partner.handler import partner_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces():
        """ Function for adding namespaces... """

        api.add_namespace(auth_namespace)
        api.add_namespace(admin_namespace)
        api.add_namespace(user_namespace)
        api.add_namespace(therapist_namespace)
        api.add_namespace(catalogue_namespace)
        api.add_namespace(panel_namespace)
        api.add_namespace(order_namespace)
        api.add_namespace(finance_namespace)
        api.add_namespace(media_namespace)
        api.add_namespace(chat_namespace)
        api.add_namespace(review_namespace)
        api.add_namespace(report_namespace)
        api.add_namespace(config_namespace)
        api.add_namespace(partner_namespace, path = '/v1')
