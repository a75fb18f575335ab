""" Urls of the modules define here... """

# All Namespaces...
from ..chat.handler import chat_namespace
from ..admin.handler import admin_namespace





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces(api):
        """ Function for adding namespaces... """

        api.add_namespace(chat_namespace)
        api.add_namespace(admin_namespace)
